"""
VSDC Gateway — DEVELOPMENT settings.
SQLite, in-memory cache, DEBUG=True, EBM pointed at the local sandbox mock.
DO NOT use in production.
"""

from vsdc_gateway.settings import *  # noqa: F401,F403
from vsdc_gateway.settings import BASE_DIR, REST_FRAMEWORK, MIDDLEWARE, INSTALLED_APPS

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = "dev-insecure-key-change-in-production-do-not-use"

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [app for app in INSTALLED_APPS if app != "django_prometheus"]
MIDDLEWARE = [m for m in MIDDLEWARE if not m.startswith("django_prometheus")]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Cache: in-memory for dev ──────────────────────────────────────────────────
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# Dev convenience: background tasks run inline, no Redis needed
CELERY_TASK_ALWAYS_EAGER = True

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    # No throttling in dev
    "DEFAULT_THROTTLE_CLASSES": [],
}

SPECTACULAR_SETTINGS = {
    "TITLE": "VSDC Gateway API (Dev)",
    "DESCRIPTION": "Development build — school feeding VSDC gateway",
    "VERSION": "dev",
}

# Dev: relaxed CORS
CORS_ALLOW_ALL_ORIGINS = True

# Local sandbox mock (docker/mocks/vsdc_server.py)
RRA_ENVIRONMENT = "test"
RRA_TEST_URL    = "http://localhost:8001"

# Dev logging: verbose, human-readable (not JSON)
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        }
    },
    "formatters": {
        "verbose": {
            "format": "[{levelname}] {name}: {message}",
            "style": "{",
        }
    },
    "root": {"handlers": ["console"], "level": "DEBUG"},
}
