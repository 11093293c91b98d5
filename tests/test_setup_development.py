"""
Tests for the setup_development management command.
"""

from io import StringIO

from django.core.management import call_command

from roster.management.commands.setup_development import SAMPLE_PERSONS
from roster.models import Person


def test_setup_without_sample_data_leaves_roster_empty() -> None:
    out = StringIO()

    call_command("setup_development", stdout=out)

    assert "Database is ready!" in out.getvalue()
    assert "Development environment setup complete!" in out.getvalue()
    assert Person.objects.count() == 0


def test_sample_data_loaded_into_empty_roster() -> None:
    out = StringIO()

    call_command("setup_development", "--with-sample-data", stdout=out)

    assert Person.objects.count() == len(SAMPLE_PERSONS)
    assert f"Sample data loaded: {len(SAMPLE_PERSONS)} persons" in out.getvalue()


def test_sample_data_skipped_when_roster_has_persons(person) -> None:
    out = StringIO()

    call_command("setup_development", "--with-sample-data", stdout=out)

    assert list(Person.objects.all()) == [person]
    assert "skipping sample data" in out.getvalue()
