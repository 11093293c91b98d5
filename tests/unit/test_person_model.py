"""
Unit tests for the Person model: derived age, clean() and column layout.
"""

from datetime import date

import pytest
from django.core.exceptions import ValidationError
from django.db import connection

from roster.models import Person, calculate_age


class TestAge:
    def test_age_on_reference_date(self) -> None:
        person = Person(birth_date=date(2000, 1, 1))
        assert person.age_on(date(2024, 6, 1)) == 24

    def test_age_before_birthday_in_year(self) -> None:
        assert calculate_age(date(2000, 6, 2), date(2024, 6, 1)) == 23

    def test_age_on_birthday(self) -> None:
        assert calculate_age(date(2000, 6, 1), date(2024, 6, 1)) == 24

    def test_age_absent_without_birth_date(self) -> None:
        person = Person(first_name="Anna")
        assert person.age_on(date(2024, 6, 1)) is None
        assert person.age is None

    def test_age_uses_current_date(self) -> None:
        person = Person(birth_date=date(2000, 1, 1))
        assert person.age is not None
        assert person.age >= 24


class TestClean:
    def test_clean_normalizes_blank_text(self, minimal_person_data) -> None:
        person = Person(**minimal_person_data, email="  ", phone="")
        person.first_name = "  Anna  "
        person.clean()

        assert person.first_name == "Anna"
        assert person.email is None
        assert person.phone is None

    def test_clean_reports_every_field(self) -> None:
        person = Person(first_name=" ", last_name="", address="", phone="123")

        with pytest.raises(ValidationError) as exc_info:
            person.clean()

        assert set(exc_info.value.message_dict) == {
            "first_name",
            "last_name",
            "address",
            "phone",
        }


def test_str_and_full_name(minimal_person_data) -> None:
    person = Person(**minimal_person_data)
    assert str(person) == "Anna Nováková"
    assert person.full_name == "Anna Nováková"


def test_table_columns_match_record_attributes() -> None:
    with connection.cursor() as cursor:
        description = connection.introspection.get_table_description(cursor, "person")

    columns = {column.name for column in description}
    assert columns == {
        "id",
        "firstName",
        "lastName",
        "birthDate",
        "address",
        "email",
        "phone",
    }
