"""
pytest configuration for the VSDC Gateway.
Sets Django settings and provides shared fixtures.
"""

import django
import pytest
from django.conf import settings


def pytest_configure(config):
    """Configure Django settings before tests run."""
    if not settings.configured:
        settings.configure(
            DATABASES={
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME":   ":memory:",
                }
            },
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "django.contrib.auth",
                "django.contrib.staticfiles",
                "rest_framework",
                "drf_spectacular",
                "corsheaders",
                "apps.authentication",
                "apps.catalog",
                "apps.vsdc",
                "apps.invoices",
                "apps.ops",
            ],
            REST_FRAMEWORK={
                "DEFAULT_AUTHENTICATION_CLASSES": [
                    "apps.authentication.backends.FirebaseAuthentication",
                ],
                "DEFAULT_PERMISSION_CLASSES": [
                    "rest_framework.permissions.IsAuthenticated",
                ],
                "EXCEPTION_HANDLER": "apps.vsdc.exceptions.vsdc_exception_handler",
                "UNAUTHENTICATED_USER": None,
                "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
            },
            SPECTACULAR_SETTINGS={
                "TITLE": "VSDC Gateway API",
                "DESCRIPTION": "School feeding POS gateway to the RRA VSDC/EBM API",
                "VERSION": "1.0.4",
                "SERVE_INCLUDE_SCHEMA": False,
            },
            SECRET_KEY="test-secret-key-not-for-production",
            DEBUG=True,
            USE_TZ=True,
            TIME_ZONE="Africa/Kigali",
            ROOT_URLCONF="vsdc_gateway.urls",
            DEFAULT_AUTO_FIELD="django.db.models.BigAutoField",
            TEMPLATES=[{
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [],
                "APP_DIRS": True,
                "OPTIONS": {
                    "context_processors": [
                        "django.template.context_processors.debug",
                        "django.template.context_processors.request",
                    ],
                },
            }],
            MIDDLEWARE=[
                "django.middleware.security.SecurityMiddleware",
                "corsheaders.middleware.CorsMiddleware",
                "django.middleware.common.CommonMiddleware",
            ],
            STATIC_URL="/static/",
            STATIC_ROOT="/tmp/staticfiles_test",
            # Dummy EBM URLs (HTTP is mocked in tests)
            RRA_ENVIRONMENT="test",
            RRA_TEST_URL="http://vsdc-mock:8001",
            RRA_TEST_REQUEST_FORM="https://myrrrrest.rra.gov.rw/",
            RRA_PRODUCTION_URL="https://api-ebm.rra.gov.rw",
            RRA_PRODUCTION_REQUEST_FORM="https://myrrra.rra.gov.rw",
            DEFAULT_BHF_ID="00",
            VSDC_TIMEOUT=30,
            VSDC_AUTO_SYNC=False,
            FIREBASE_SERVICE_ACCOUNT="",
            FIREBASE_CREDENTIALS_FILE="/nonexistent/serviceAccountKey.json",
            CACHES={
                "default": {
                    "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
                }
            },
            CELERY_TASK_ALWAYS_EAGER=True,   # Execute tasks synchronously in tests
            CELERY_TASK_EAGER_PROPAGATES=True,
            CORS_ALLOW_ALL_ORIGINS=True,
        )
        django.setup()


@pytest.fixture(autouse=True)
def memory_store(monkeypatch):
    """Every test talks to an in-memory document store instead of Firestore."""
    from tests.fakes import InMemoryStore
    store = InMemoryStore()
    monkeypatch.setattr("apps.vsdc.store._store", store)
    return store


@pytest.fixture(autouse=True)
def reset_vsdc_config(monkeypatch):
    """Config is cached per process; rebuild it from the test settings each time."""
    monkeypatch.setattr("apps.vsdc.config._config", None)
