"""
Testing settings for rosterback project.
Isolated test configuration that doesn't depend on external environment variables.
"""

import os

# Set required environment variables for testing if not already set
# This must be done BEFORE importing base settings
if not os.environ.get("SECRET_KEY"):
    # Generate a secure secret key for testing to avoid validation errors
    from django.core.management.utils import get_random_secret_key

    os.environ["SECRET_KEY"] = get_random_secret_key()

import environ

from .base import *  # noqa: F403,F401

# Override settings for testing
DEBUG: bool = False

# Use in-memory database for tests, unless DATABASE_URL is provided (e.g., for CI)
if "DATABASE_URL" in os.environ:
    # Use the database URL from environment (typically PostgreSQL in CI)
    DATABASES = {"default": environ.Env.db_url_config(os.environ["DATABASE_URL"])}
else:
    # Use in-memory SQLite for local testing
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

# Minimal logging for tests - reduce noise
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
        "console": {
            "level": "ERROR",
            "class": "logging.StreamHandler",
        },
    },
    "root": {
        "handlers": ["null"],
        "level": "ERROR",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
        "roster": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}

# Security settings can be relaxed for testing
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Test-specific settings
TEST_RUNNER = "django.test.runner.DiscoverRunner"

# Set ALLOWED_HOSTS for testing
ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]
