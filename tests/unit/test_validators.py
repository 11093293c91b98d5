"""
Unit tests for the person validation rules.

Covers:
- Normalization of blank text to None
- Each per-field validator
- The combined validate_person pass (ordering, no short-circuiting)
"""

from datetime import date, timedelta

import pytest

from roster.validators import (
    REQUIRED_MESSAGE,
    FieldError,
    errors_by_field,
    normalize_person_data,
    normalize_text,
    validate_address,
    validate_birth_date,
    validate_email,
    validate_first_name,
    validate_person,
    validate_phone,
)


class TestNormalizeText:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n "])
    def test_blank_becomes_none(self, value) -> None:
        assert normalize_text(value) is None

    def test_text_is_stripped(self) -> None:
        assert normalize_text("  Anna ") == "Anna"

    def test_normalize_person_data_leaves_dates_alone(self) -> None:
        data = {"first_name": " Anna ", "birth_date": date(2000, 1, 1), "email": " "}
        normalized = normalize_person_data(data)

        assert normalized["first_name"] == "Anna"
        assert normalized["birth_date"] == date(2000, 1, 1)
        assert normalized["email"] is None
        assert normalized["phone"] is None
        # Input is not modified
        assert data["first_name"] == " Anna "


class TestRequiredText:
    def test_missing_first_name(self) -> None:
        assert validate_first_name(None) == [REQUIRED_MESSAGE]

    def test_first_name_max_length(self) -> None:
        assert validate_first_name("A" * 100) == []
        errors = validate_first_name("A" * 101)
        assert len(errors) == 1
        assert "100 characters" in errors[0]

    def test_address_max_length(self) -> None:
        assert validate_address("A" * 200) == []
        assert validate_address("A" * 201) != []


class TestBirthDate:
    def test_absent_birth_date_is_valid(self) -> None:
        assert validate_birth_date(None) == []

    def test_today_is_valid(self) -> None:
        today = date(2024, 6, 1)
        assert validate_birth_date(today, today=today) == []

    def test_future_birth_date_rejected(self) -> None:
        today = date(2024, 6, 1)
        errors = validate_birth_date(today + timedelta(days=1), today=today)
        assert errors == ["Birth date cannot be in the future."]


class TestEmail:
    def test_absent_email_is_valid(self) -> None:
        assert validate_email(None) == []

    def test_valid_email(self) -> None:
        assert validate_email("anna@example.org") == []

    @pytest.mark.parametrize("value", ["anna", "anna@", "@example.org", "a b@c.org"])
    def test_invalid_email(self, value) -> None:
        assert validate_email(value) == ["Enter a valid email address."]

    def test_email_max_length(self) -> None:
        value = "a" * 90 + "@example.org"
        errors = validate_email(value)
        assert any("100 characters" in error for error in errors)


class TestPhone:
    def test_absent_phone_is_valid(self) -> None:
        assert validate_phone(None) == []

    @pytest.mark.parametrize("value", ["+420123456789", "123456789", "1234567890123"])
    def test_valid_phone(self, value) -> None:
        assert validate_phone(value) == []

    def test_too_short_phone_rejected(self) -> None:
        errors = validate_phone("123")
        assert len(errors) == 1
        assert "between 9 and 13" in errors[0]

    def test_too_long_phone_rejected(self) -> None:
        assert validate_phone("12345678901234") != []

    def test_non_digit_phone_rejected(self) -> None:
        errors = validate_phone("12a456789")
        assert len(errors) == 1
        assert "digits" in errors[0]

    @pytest.mark.parametrize("value", ["١٢٣٤٥٦٧٨٩", "１２３４５６７８９"])
    def test_non_ascii_digits_rejected(self, value) -> None:
        errors = validate_phone(value)
        assert len(errors) == 1
        assert "digits" in errors[0]

    def test_plus_only_allowed_at_start(self) -> None:
        assert validate_phone("42012+3456") != []

    def test_length_and_format_reported_together(self) -> None:
        assert len(validate_phone("12a")) == 2


class TestValidatePerson:
    def test_valid_data_has_no_violations(self, valid_person_data) -> None:
        assert validate_person(valid_person_data) == []

    def test_minimal_data_has_no_violations(self, minimal_person_data) -> None:
        assert validate_person(minimal_person_data) == []

    def test_blank_first_name_same_as_absent(self, minimal_person_data) -> None:
        blank = {**minimal_person_data, "first_name": "   "}
        absent = {k: v for k, v in minimal_person_data.items() if k != "first_name"}

        assert validate_person(blank) == validate_person(absent)
        assert validate_person(blank) == [FieldError("first_name", REQUIRED_MESSAGE)]

    def test_all_violations_are_collected(self) -> None:
        data = {
            "first_name": "",
            "last_name": "B" * 101,
            "birth_date": date(2999, 1, 1),
            "address": None,
            "email": "not-an-email",
            "phone": "12a",
        }
        violations = validate_person(data, today=date(2024, 6, 1))
        fields = [violation.field for violation in violations]

        assert fields == [
            "first_name",
            "last_name",
            "birth_date",
            "address",
            "email",
            "phone",
            "phone",
        ]

    def test_errors_by_field_groups_messages(self) -> None:
        violations = validate_person({"phone": "12a"})
        grouped = errors_by_field(violations)

        assert set(grouped) == {"first_name", "last_name", "address", "phone"}
        assert len(grouped["phone"]) == 2
