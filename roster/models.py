from datetime import date

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from roster.validators import (
    ADDRESS_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PERSON_FIELDS,
    PHONE_MAX_LENGTH,
    errors_by_field,
    normalize_person_data,
    validate_person,
)


def calculate_age(birth_date: date | None, today: date) -> int | None:
    """
    Count the whole years between ``birth_date`` and ``today``.

    Args:
        birth_date: Date of birth or ``None``
        today: Date the age is evaluated on

    Returns:
        Age in completed years, or ``None`` when the birth date is unknown
    """
    if birth_date is None:
        return None
    return (
        today.year
        - birth_date.year
        - ((today.month, today.day) < (birth_date.month, birth_date.day))
    )


class Person(models.Model):
    """
    A person kept in the roster.

    Column names in the ``person`` table follow the record attribute names
    (firstName, lastName, birthDate, ...) so the table can be read by other
    tools; Python code uses the snake_case field names.
    """

    id = models.BigAutoField(primary_key=True)

    first_name = models.CharField(max_length=NAME_MAX_LENGTH, db_column="firstName")
    last_name = models.CharField(max_length=NAME_MAX_LENGTH, db_column="lastName")
    birth_date = models.DateField(null=True, blank=True, db_column="birthDate")
    address = models.CharField(max_length=ADDRESS_MAX_LENGTH)
    email = models.CharField(max_length=EMAIL_MAX_LENGTH, null=True, blank=True)
    phone = models.CharField(max_length=PHONE_MAX_LENGTH, null=True, blank=True)

    class Meta:
        db_table = "person"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def clean(self) -> None:
        """Normalize text fields and run the full validation pass."""
        super().clean()
        # Model fields accept ISO strings; parse before comparing dates
        try:
            self.birth_date = self._meta.get_field("birth_date").to_python(
                self.birth_date
            )
        except ValidationError as e:
            raise ValidationError({"birth_date": e.messages}) from e
        self.apply(normalize_person_data(self.field_values()))
        violations = validate_person(self.field_values())
        if violations:
            raise ValidationError(errors_by_field(violations))

    def field_values(self) -> dict:
        """Return the editable fields as a plain dict."""
        return {name: getattr(self, name) for name in PERSON_FIELDS}

    def apply(self, values: dict) -> None:
        """Copy editable field values onto this instance, ignoring other keys."""
        for name in PERSON_FIELDS:
            if name in values:
                setattr(self, name, values[name])

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def age(self) -> int | None:
        """Calculate age based on birth date."""
        return self.age_on(timezone.localdate())

    def age_on(self, today: date) -> int | None:
        return calculate_age(self.birth_date, today)
