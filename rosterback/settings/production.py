"""
Production settings for rosterback project.
"""

import environ

from .base import *  # noqa: F403

env = environ.Env()

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG: bool = False

# Production allowed hosts - should be set via environment variable
ALLOWED_HOSTS: list[str] = env.list("ALLOWED_HOSTS", default=[])

# Security settings for production
SECURE_SSL_REDIRECT: bool = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS: int = env.int("SECURE_HSTS_SECONDS", default=31536000)  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS: bool = env.bool(
    "SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True
)
SECURE_HSTS_PRELOAD: bool = env.bool("SECURE_HSTS_PRELOAD", default=True)
SECURE_CONTENT_TYPE_NOSNIFF: bool = True
SECURE_PROXY_SSL_HEADER: tuple = ("HTTP_X_FORWARDED_PROTO", "https")
X_FRAME_OPTIONS: str = "DENY"
SECURE_REFERRER_POLICY: str = "strict-origin-when-cross-origin"
SECURE_CROSS_ORIGIN_OPENER_POLICY: str = "same-origin"

# Session security - Override base settings for production
SESSION_COOKIE_SECURE: bool = True
SESSION_COOKIE_HTTPONLY: bool = True
SESSION_COOKIE_SAMESITE: str = "Strict"  # Stricter than base "Lax"
CSRF_COOKIE_SECURE: bool = True
CSRF_COOKIE_HTTPONLY: bool = True
CSRF_COOKIE_SAMESITE: str = "Strict"

# Production logging - more restrictive
LOGGING["handlers"]["file"]["level"] = "WARNING"  # noqa: F405
LOGGING["handlers"]["console"]["level"] = "ERROR"  # noqa: F405
LOGGING["loggers"]["roster"]["level"] = "INFO"  # noqa: F405
LOGGING["root"]["level"] = "WARNING"  # noqa: F405
