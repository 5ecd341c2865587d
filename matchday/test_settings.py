"""
Test settings - in-memory database and quiet logging for tests
"""
from .settings import *

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Only warnings and errors from our own loggers
LOGGING["loggers"]["matchday"]["level"] = "WARNING"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
