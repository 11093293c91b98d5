"""
Development settings for rosterback project.
"""

import environ

from .base import *  # noqa: F403

env = environ.Env()

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

# Development-specific allowed hosts
ALLOWED_HOSTS.extend(["localhost", "127.0.0.1", "0.0.0.0"])  # noqa: F405

# Cookies travel over plain HTTP on the development server
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Database
# Uses DATABASE_URL from .env file (defaults to SQLite for development)
# To use PostgreSQL, update DATABASE_URL in .env file

# Development-specific logging
LOGGING["handlers"]["console"]["level"] = "DEBUG"  # noqa: F405
