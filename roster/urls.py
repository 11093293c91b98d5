"""
URL configuration for the roster application.

Route table:
- GET  /               list of persons
- GET  /new            empty form for a new person
- POST /new            create a person
- GET  /<id>           person detail, 404 if unknown
- POST /<id>           update a person (``action=delete`` deletes instead)
- POST /<id>/delete    delete a person

The ``int`` converter only matches ``[0-9]+``. A single PersonStore is built
here and handed to every view.
"""

from django.urls import path

from roster.services.person_store import PersonStore
from roster.views import (
    PersonCreateView,
    PersonDeleteView,
    PersonDetailView,
    PersonListView,
)

app_name = "roster"

store = PersonStore()

urlpatterns = [
    path("", PersonListView.as_view(store=store), name="person_list"),
    path("new", PersonCreateView.as_view(store=store), name="person_create"),
    path("<int:pk>", PersonDetailView.as_view(store=store), name="person_detail"),
    path(
        "<int:pk>/delete",
        PersonDeleteView.as_view(store=store),
        name="person_delete",
    ),
]
