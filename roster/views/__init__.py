"""
Views package for the roster application.

This package contains all view logic for the roster application,
organized by functionality.
"""

from .person import (
    PersonCreateView,
    PersonDeleteView,
    PersonDetailView,
    PersonListView,
)

__all__ = [
    "PersonCreateView",
    "PersonDeleteView",
    "PersonDetailView",
    "PersonListView",
]
