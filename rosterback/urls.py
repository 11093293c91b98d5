"""
Root URL configuration for rosterback project.

The roster application owns the whole site, so its URL table is mounted at
the root.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("roster.urls")),
]
