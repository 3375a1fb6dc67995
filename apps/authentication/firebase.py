"""
Firebase Admin bootstrap — the single place service-account credentials are loaded.

Order of precedence:
  1. FIREBASE_SERVICE_ACCOUNT  — the service-account JSON as a string (Railway / containers)
  2. FIREBASE_CREDENTIALS_FILE — path to serviceAccountKey.json (local development)
"""

import json
import logging
import threading

import firebase_admin
from firebase_admin import credentials
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger("vsdc_gateway.firebase")

_lock = threading.Lock()


def load_service_account() -> dict:
    raw = getattr(settings, "FIREBASE_SERVICE_ACCOUNT", "")
    if raw:
        try:
            info = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Failed to parse FIREBASE_SERVICE_ACCOUNT: %s", exc)
            raise ImproperlyConfigured("FIREBASE_SERVICE_ACCOUNT is not valid JSON.") from exc
        logger.info("Firebase: using service account from environment variable")
        return info

    path = settings.FIREBASE_CREDENTIALS_FILE
    try:
        with open(path, encoding="utf-8") as fh:
            info = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Firebase credentials file %s unusable: %s", path, exc)
        raise ImproperlyConfigured(
            "Set FIREBASE_SERVICE_ACCOUNT or provide a serviceAccountKey.json file."
        ) from exc
    logger.info("Firebase: using local credentials file %s", path)
    return info


def get_firebase_app() -> firebase_admin.App:
    """Return the default Firebase app, initialising it on first use."""
    with _lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass
        cred = credentials.Certificate(load_service_account())
        app = firebase_admin.initialize_app(cred)
        logger.info("Firebase Admin initialized for project %s", app.project_id)
        return app
