"""
Person store for the roster application.

This module owns all persistence of Person records:
- Listing every stored person
- Looking a person up by identifier
- Inserting new persons and replacing existing ones
- Deleting persons

The store is a plain object that views receive at construction time, which
keeps the request handlers free of ORM details and makes them easy to test
with a different store.
"""

from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction
from loguru import logger

from roster.models import Person

# Largest value a BigAutoField primary key can hold
MAX_PERSON_ID = 2**63 - 1


class PersonNotFoundError(ObjectDoesNotExist):
    """Raised when no person is stored under the requested identifier."""

    def __init__(self, person_id: int) -> None:
        super().__init__(f"Person {person_id} does not exist")
        self.person_id = person_id


def _in_id_range(person_id: int) -> bool:
    return 0 <= person_id <= MAX_PERSON_ID


class PersonStore:
    """
    CRUD access to Person records keyed by identifier.

    Identifiers are assigned by the database on insert. Records are never
    written unless they pass the same validation the forms apply, so an
    invalid record cannot reach the table even if a caller skips the form.

    Example:
        >>> store = PersonStore()
        >>> person = store.save(
        ...     Person(first_name="Anna", last_name="Nováková", address="Main St 1")
        ... )
        >>> store.find_by_id(person.pk).full_name
        'Anna Nováková'
        >>> store.delete_by_id(person.pk)
        True
    """

    def list_all(self) -> list[Person]:
        """Return every stored person ordered by identifier."""
        persons = list(Person.objects.order_by("id"))
        logger.debug(f"Loaded {len(persons)} persons")
        return persons

    def count(self) -> int:
        return Person.objects.count()

    def find_by_id(self, person_id: int) -> Person:
        """
        Return the person stored under ``person_id``.

        Args:
            person_id: Identifier of the person

        Returns:
            The stored Person

        Raises:
            PersonNotFoundError: If no such person exists
        """
        if not _in_id_range(person_id):
            raise PersonNotFoundError(person_id)
        try:
            return Person.objects.get(pk=person_id)
        except Person.DoesNotExist:
            logger.warning(f"Person {person_id} not found")
            raise PersonNotFoundError(person_id) from None

    @transaction.atomic
    def save(self, person: Person) -> Person:
        """
        Insert a new person or replace a stored one.

        Text fields are normalized and the whole record validated before
        anything is written. A person without an identifier is inserted and
        receives one from the database; a person with an identifier replaces
        every column of the stored row.

        Args:
            person: Person to store

        Returns:
            The same Person instance, with ``pk`` set after an insert

        Raises:
            ValidationError: If the record violates any field rule
            PersonNotFoundError: If the identifier refers to no stored person
        """
        person.clean()

        if person.pk is None:
            person.save(force_insert=True)
            logger.info(f"Created person {person.pk} - {person.full_name}")
            return person

        # A single UPDATE keeps a concurrent delete from resurrecting the row
        updated = 0
        if _in_id_range(person.pk):
            updated = Person.objects.filter(pk=person.pk).update(
                **person.field_values()
            )
        if not updated:
            logger.warning(f"Cannot update person {person.pk}: not found")
            raise PersonNotFoundError(person.pk)

        logger.info(f"Updated person {person.pk} - {person.full_name}")
        return person

    @transaction.atomic
    def delete_by_id(self, person_id: int) -> bool:
        """
        Delete the person stored under ``person_id``.

        Deleting an identifier that refers to nothing is not an error.

        Returns:
            True if a person was removed, False if none existed
        """
        if not _in_id_range(person_id):
            return False
        deleted, _ = Person.objects.filter(pk=person_id).delete()
        if deleted:
            logger.info(f"Deleted person {person_id}")
        else:
            logger.debug(f"Delete of person {person_id} skipped: not found")
        return bool(deleted)
