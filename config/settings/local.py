# config/settings/local.py
from .base import *  # noqa
import os

DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

if os.getenv("DB_ENGINE", "sqlite") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }
