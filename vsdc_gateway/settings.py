"""
VSDC Gateway – Production-oriented Django settings.
School-feeding POS ⇄ Rwanda Revenue Authority VSDC/EBM; records live in Firestore.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "CHANGE-ME-IN-PRODUCTION")

DEBUG = os.environ.get("DEBUG", "False") == "True"

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "localhost 127.0.0.1").split()

# ── Apps ─────────────────────────────────────────────────────────────────────
DJANGO_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "rest_framework",
    "drf_spectacular",
    "corsheaders",
    "django_prometheus",
]

LOCAL_APPS = [
    "apps.authentication",
    "apps.catalog",
    "apps.vsdc",
    "apps.invoices",
    "apps.ops",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    "django_prometheus.middleware.PrometheusBeforeMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_prometheus.middleware.PrometheusAfterMiddleware",
]

ROOT_URLCONF = "vsdc_gateway.urls"
WSGI_APPLICATION = "vsdc_gateway.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

# ── Database ─────────────────────────────────────────────────────────────────
# System of record is Firestore; the SQL database only backs Django internals.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME":   os.environ.get("DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

# ── Cache / Redis (throttling) ───────────────────────────────────────────────
REDIS_URL = os.environ.get("REDIS_URL", "redis://redis:6379/0")

CACHES = {
    "default": {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": REDIS_URL,
        "OPTIONS": {"CLIENT_CLASS": "django_redis.client.DefaultClient"},
    }
}

# ── Celery (background EBM item sync) ────────────────────────────────────────
CELERY_BROKER_URL      = REDIS_URL
CELERY_RESULT_BACKEND  = REDIS_URL
CELERY_TASK_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT  = ["json"]
CELERY_TIMEZONE        = "Africa/Kigali"

# ── Firebase (identity + Firestore) ──────────────────────────────────────────
FIREBASE_SERVICE_ACCOUNT  = os.environ.get("FIREBASE_SERVICE_ACCOUNT", "")
FIREBASE_CREDENTIALS_FILE = os.environ.get(
    "FIREBASE_CREDENTIALS_FILE", str(BASE_DIR / "serviceAccountKey.json")
)

# ── DRF ───────────────────────────────────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "apps.authentication.backends.FirebaseAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "EXCEPTION_HANDLER": "apps.vsdc.exceptions.vsdc_exception_handler",
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.AnonRateThrottle",
        "rest_framework.throttling.UserRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "anon": "100/hour",
        "user": "5000/hour",
    },
}

# ── OpenAPI ───────────────────────────────────────────────────────────────────
SPECTACULAR_SETTINGS = {
    "TITLE": "VSDC Gateway API",
    "DESCRIPTION": "School feeding POS gateway to the RRA VSDC/EBM API",
    "VERSION": "1.0.4",
    "SERVE_INCLUDE_SCHEMA": False,
}

# ── Internationalisation ──────────────────────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE     = "Africa/Kigali"
USE_I18N      = True
USE_TZ        = True

STATIC_URL  = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# ── CORS ──────────────────────────────────────────────────────────────────────
CORS_ALLOWED_ORIGINS = os.environ.get(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:3000 "
    "https://schoolfeedingsystem.web.app "
    "https://schoolfeedingsystem.firebaseapp.com",
).split()
CORS_ALLOW_CREDENTIALS = True

# ── Logging (structured JSON) ─────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        }
    },
    "root": {"handlers": ["console"], "level": "INFO"},
    "loggers": {
        "django":       {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "vsdc_gateway": {"handlers": ["console"], "level": "INFO",    "propagate": False},
    },
}

# ── RRA VSDC / EBM ────────────────────────────────────────────────────────────
RRA_ENVIRONMENT             = os.environ.get("RRA_ENVIRONMENT",    "test")
RRA_TEST_URL                = os.environ.get("RRA_TEST_URL",       "https://sedsandbox.rra.gov.rw")
RRA_TEST_REQUEST_FORM       = "https://myrrrrest.rra.gov.rw/"
RRA_PRODUCTION_URL          = os.environ.get("RRA_PRODUCTION_URL", "https://api-ebm.rra.gov.rw")
RRA_PRODUCTION_REQUEST_FORM = "https://myrrra.rra.gov.rw"
DEFAULT_BHF_ID              = os.environ.get("DEFAULT_BHF_ID",     "00")
VSDC_TIMEOUT                = 30
VSDC_AUTO_SYNC              = os.environ.get("VSDC_AUTO_SYNC", "False") == "True"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
