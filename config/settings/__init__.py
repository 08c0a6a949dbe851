# config/settings/__init__.py
# WARD_ENV selects the settings module: "prod" or "local" (default).
# Tests point DJANGO_SETTINGS_MODULE at config.settings.test directly.
import os

_ward_env = os.getenv("WARD_ENV", os.getenv("DJANGO_ENV", "local")).strip().lower()

if _ward_env in ("prod", "production"):
    from .prod import *  # noqa
else:
    from .local import *  # noqa
