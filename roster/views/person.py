"""
Person views for the roster application.

This module provides the request handlers for Person records:
- PersonListView: List every stored person
- PersonCreateView: Show an empty form and create a person from it
- PersonDetailView: Show one person and save changes to it
- PersonDeleteView: Delete a person

Every view receives its PersonStore explicitly through ``as_view(store=...)``
(see ``roster.urls``); nothing is looked up globally. Successful changes
redirect to the list, invalid submissions re-render the form with every
field error, and unknown identifiers produce a 404.
"""

from typing import Any

from django.contrib import messages
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.views.generic import FormView, TemplateView, View
from loguru import logger

from roster.forms import PersonForm
from roster.models import Person
from roster.services.person_store import PersonNotFoundError, PersonStore

# Value of the ``action`` field that turns POST /<id> into a delete
DELETE_ACTION = "delete"


class PersonStoreMixin:
    """Give a view access to the PersonStore passed to ``as_view``."""

    store: PersonStore | None = None

    def get_store(self) -> PersonStore:
        if self.store is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} needs a store; "
                f"pass one with {type(self).__name__}.as_view(store=...)"
            )
        return self.store


def _add_store_errors(form: PersonForm, error: ValidationError) -> None:
    # Field-specific errors raised at the store boundary go back on the form
    if hasattr(error, "message_dict"):
        for field, errors in error.message_dict.items():
            for message in errors:
                if field in form.fields:
                    form.add_error(field, message)
                else:
                    form.add_error(None, message)
    else:
        for message in error.messages:
            form.add_error(None, message)


def _delete_person(request: HttpRequest, store: PersonStore, person_id: int) -> HttpResponse:
    if store.delete_by_id(person_id):
        messages.success(request, "Person deleted.")
    return redirect("roster:person_list")


class PersonListView(PersonStoreMixin, TemplateView):
    """
    View listing every stored person.

    Context:
        persons: All persons ordered by identifier
        page_title: Title for the page
    """

    template_name = "roster/person/list.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context["persons"] = self.get_store().list_all()
        context["page_title"] = "Persons"
        return context


class PersonFormMixin(PersonStoreMixin):
    """Shared form handling for creating and editing persons."""

    template_name = "roster/person/detail.html"
    form_class = PersonForm
    success_url = reverse_lazy("roster:person_list")

    def form_invalid(self, form: PersonForm) -> HttpResponse:
        """
        Handle invalid form submission.

        Adds an error message and logs validation errors for debugging.
        """
        logger.warning(f"Person form invalid: {form.errors.as_json()}")

        messages.error(
            self.request,
            "Please correct the errors below and try again.",
        )

        return super().form_invalid(form)


class PersonCreateView(PersonFormMixin, FormView):
    """
    View for creating new Person records.

    GET renders an empty form; POST validates the submission and stores a
    new person. Any identifier in the submitted data is ignored, the store
    always assigns a fresh one.
    """

    def form_valid(self, form: PersonForm) -> HttpResponse:
        """Store the new person and redirect to the list."""
        person = form.to_person()
        person.pk = None

        try:
            self.get_store().save(person)
        except ValidationError as e:
            logger.error(f"Validation error creating person: {e}")
            _add_store_errors(form, e)
            return self.form_invalid(form)

        messages.success(self.request, f"Person '{person.full_name}' created.")
        return super().form_valid(form)

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context["person"] = Person()
        context["page_title"] = "New person"
        context["submit_button_text"] = "Create"
        return context


class PersonDetailView(PersonFormMixin, FormView):
    """
    View showing one person and saving changes to it.

    The identifier always comes from the URL. POST data carrying
    ``action=delete`` deletes the person instead of updating it.

    Context:
        person: The stored Person
        age: Age derived from the birth date, or None
        form: Form with the person's values or the rejected submission
    """

    person: Person

    def get_person(self) -> Person:
        try:
            return self.get_store().find_by_id(self.kwargs["pk"])
        except PersonNotFoundError as e:
            raise Http404(str(e)) from e

    def get(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        self.person = self.get_person()
        form = PersonForm.for_person(self.person)
        logger.debug(f"Showing person {self.person.pk}")
        return self.render_to_response(self.get_context_data(form=form))

    def post(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        if request.POST.get("action") == DELETE_ACTION:
            return _delete_person(request, self.get_store(), self.kwargs["pk"])
        self.person = self.get_person()
        return super().post(request, *args, **kwargs)

    def form_valid(self, form: PersonForm) -> HttpResponse:
        """Replace the stored person, keeping the identifier from the URL."""
        person = form.to_person(person_id=self.kwargs["pk"])

        try:
            self.get_store().save(person)
        except ValidationError as e:
            logger.error(f"Validation error updating person {person.pk}: {e}")
            _add_store_errors(form, e)
            return self.form_invalid(form)
        except PersonNotFoundError as e:
            raise Http404(str(e)) from e

        messages.success(self.request, f"Person '{person.full_name}' saved.")
        return super().form_valid(form)

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context["person"] = self.person
        context["age"] = self.person.age
        context["page_title"] = f"Person: {self.person.full_name}"
        context["submit_button_text"] = "Save"
        return context


class PersonDeleteView(PersonStoreMixin, View):
    """Delete a person and redirect to the list, even if it was already gone."""

    http_method_names = ["post"]

    def post(self, request: HttpRequest, pk: int) -> HttpResponse:
        return _delete_person(request, self.get_store(), pk)
