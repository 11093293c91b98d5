"""
Forms for the roster application.

PersonForm turns submitted form data into a Person:
1. Field-level: text is stripped and blank text becomes None, the birth
   date is parsed
2. Form-level: the full validation pass from ``roster.validators`` runs
   once and every violation is attached to its field

The form has no ``id`` field on purpose. The identifier of a person always
comes from the URL, never from submitted content.
"""

from typing import Any

from django import forms

from roster.models import Person
from roster.validators import (
    ADDRESS_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PERSON_FIELDS,
    PHONE_MAX_LENGTH,
    FieldError,
    validate_person,
)


def _text_field(
    label: str, max_length: int, widget: type[forms.Widget] = forms.TextInput, **attrs: Any
) -> forms.CharField:
    # Required and length rules live in validate_person so that every
    # violation is reported by a single pass
    return forms.CharField(
        label=label,
        required=False,
        strip=True,
        empty_value=None,
        widget=widget(
            attrs={"class": "form-control", "maxlength": max_length, **attrs}
        ),
    )


class PersonForm(forms.Form):
    """
    Form for creating and editing Person records.

    Example:
        >>> form = PersonForm(data={
        ...     'first_name': 'Anna',
        ...     'last_name': 'Nováková',
        ...     'address': 'Main St 1',
        ... })
        >>> form.is_valid()
        True
        >>> form.to_person().email is None
        True
    """

    first_name = _text_field("First name", NAME_MAX_LENGTH, autocomplete="given-name")
    last_name = _text_field("Last name", NAME_MAX_LENGTH, autocomplete="family-name")
    birth_date = forms.DateField(
        label="Birth date",
        required=False,
        widget=forms.DateInput(
            format="%Y-%m-%d", attrs={"type": "date", "class": "form-control"}
        ),
        help_text="Must not be in the future",
    )
    address = _text_field("Address", ADDRESS_MAX_LENGTH)
    email = _text_field("Email", EMAIL_MAX_LENGTH, widget=forms.EmailInput)
    phone = _text_field("Phone", PHONE_MAX_LENGTH, inputmode="tel")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.violations: list[FieldError] = []

    @classmethod
    def for_person(cls, person: Person) -> "PersonForm":
        """Build an unbound form showing the values of ``person``."""
        return cls(initial=person.field_values())

    def clean(self) -> dict[str, Any]:
        """Run the full validation pass and attach every violation."""
        cleaned_data = super().clean()
        # A birth date that failed to parse is already reported by DateField
        self.violations = validate_person(cleaned_data)
        for violation in self.violations:
            self.add_error(violation.field, violation.message)
        return cleaned_data

    def to_person(self, person_id: int | None = None) -> Person:
        """
        Build an unsaved Person from the cleaned data.

        Args:
            person_id: Identifier taken from the URL, or None for a new person

        Returns:
            Person instance that has not been written to the database
        """
        person = Person(id=person_id)
        person.apply({name: self.cleaned_data.get(name) for name in PERSON_FIELDS})
        return person
