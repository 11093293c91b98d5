"""
Service layer for the roster application.

This package contains persistence logic separated from view logic,
following the service layer pattern for better testability and reusability.
"""

from .person_store import PersonNotFoundError, PersonStore

__all__ = ["PersonNotFoundError", "PersonStore"]
