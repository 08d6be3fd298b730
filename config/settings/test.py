"""
Test settings: in-memory database and quiet logging.
"""

from .base import *  # noqa: F403,F405

SECRET_KEY = "test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

LOGGING["loggers"]["apps.calendars"]["level"] = "WARNING"  # noqa: F405
