"""
PropMon – Django Settings (Infrastructure Only)
================================================
Django hosts the ORM store, settings and logging configuration.
The property monitor itself is plain Python; Django does not
dictate its structure.
"""

import os
import tempfile
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
# BASE_DIR = project root (where pyproject.toml lives)
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("PROPERTY_MONITOR_SECRET_KEY", "propmon-dev-key")

DEBUG = os.environ.get("PROPERTY_MONITOR_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "core.storage",
]

# ── Database ──────────────────────────────────────────────────
# SQLite file database. The test database is also a file so the
# store's worker thread sees the same tables as the test thread.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
        "TEST": {
            "NAME": os.path.join(tempfile.gettempdir(), "propmon_test.sqlite3"),
        },
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-gb"
TIME_ZONE = "Europe/London"
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "propmon": {
            "handlers": ["console"],
            "level": os.environ.get("PROPERTY_MONITOR_LOG_LEVEL", "INFO"),
        },
    },
}

# ── Property Monitor ──────────────────────────────────────────
PROPERTY_MONITOR = {
    "APPLICATION_NAME": "propertymonitor",
    "ROOT_DIRECTORY": os.environ.get("PROPERTY_MONITOR_ROOT"),
    "MODEL_DIRECTORY": "model",
    "PROPERTY_FILE": "property.dat",
    "STORE_BACKEND": os.environ.get("PROPERTY_MONITOR_STORE", "file"),
}
