"""
Django management command to set up the development environment.
"""

import time
from datetime import date

from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connection
from loguru import logger

from roster.models import Person
from roster.services.person_store import PersonStore

SAMPLE_PERSONS = [
    {
        "first_name": "Božena",
        "last_name": "Němcová",
        "birth_date": date(1820, 2, 4),
        "address": "Vienna",
    },
    {
        "first_name": "Anna",
        "last_name": "Nováková",
        "address": "Main St 1",
    },
    {
        "first_name": "Jan",
        "last_name": "Novák",
        "birth_date": date(1985, 6, 12),
        "address": "Station Road 12",
        "email": "jan.novak@example.org",
        "phone": "+420123456789",
    },
]


class Command(BaseCommand):
    help = "Set up the development environment: database, migrations, sample data"

    def add_arguments(self, parser):
        parser.add_argument(
            "--with-sample-data",
            action="store_true",
            help="Insert a few sample persons when the roster is empty",
        )
        parser.add_argument(
            "--db-retries",
            type=int,
            default=30,
            help="How many times to try connecting to the database",
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("Setting up roster development environment..."))

        # Wait for database to be ready
        self._wait_for_database(options["db_retries"])

        # Run migrations
        self._run_migrations()

        if options["with_sample_data"]:
            self._load_sample_persons()

        self.stdout.write(self.style.SUCCESS("\nDevelopment environment setup complete!"))
        self.stdout.write("\nYou can now access the application at http://localhost:8000")

    def _wait_for_database(self, retries: int):
        """Wait for database to be ready."""
        self.stdout.write("Waiting for database to be ready...")

        while retries > 0:
            try:
                connection.ensure_connection()
                break
            except DatabaseError as e:
                self.stdout.write(f"Database not ready, waiting... ({e})")
                time.sleep(1)
                retries -= 1
        else:
            self.stdout.write(self.style.ERROR("Database connection failed!"))
            raise CommandError("Could not connect to database")

        self.stdout.write(self.style.SUCCESS("Database is ready!"))

    def _run_migrations(self):
        """Run database migrations."""
        self.stdout.write("Running database migrations...")
        call_command("migrate", verbosity=0)
        self.stdout.write(self.style.SUCCESS("Migrations completed!"))

    def _load_sample_persons(self):
        """Insert sample persons through the store, only into an empty roster."""
        store = PersonStore()
        if store.count():
            self.stdout.write("Roster already has persons, skipping sample data")
            return

        for values in SAMPLE_PERSONS:
            person = Person()
            person.apply(values)
            store.save(person)

        logger.info(f"Inserted {len(SAMPLE_PERSONS)} sample persons")
        self.stdout.write(
            self.style.SUCCESS(f"Sample data loaded: {len(SAMPLE_PERSONS)} persons")
        )
