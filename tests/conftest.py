"""
Pytest configuration and fixtures for the roster tests.
"""

from datetime import date
from typing import Any

import pytest

from roster.models import Person
from roster.services.person_store import PersonStore


@pytest.fixture(autouse=True)
def enable_db_access_for_all_tests(db):
    """
    Enable database access for all tests.
    This fixture ensures that all tests have access to the database.
    """
    pass


@pytest.fixture
def store() -> PersonStore:
    """Create a PersonStore instance."""
    return PersonStore()


@pytest.fixture
def valid_person_data() -> dict[str, Any]:
    """Provide valid person data with every field filled in."""
    return {
        "first_name": "Jan",
        "last_name": "Novák",
        "birth_date": date(1985, 6, 12),
        "address": "Station Road 12",
        "email": "jan.novak@example.org",
        "phone": "+420123456789",
    }


@pytest.fixture
def minimal_person_data() -> dict[str, Any]:
    """Provide only the required person fields."""
    return {
        "first_name": "Anna",
        "last_name": "Nováková",
        "address": "Main St 1",
    }


@pytest.fixture
def person(valid_person_data) -> Person:
    """Create a stored person."""
    return Person.objects.create(**valid_person_data)
