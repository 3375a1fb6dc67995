"""
DRF authentication backed by Firebase ID tokens.
The gateway keeps no user table: the verified token claims are the user.
"""

import logging

from firebase_admin import auth as firebase_auth
from firebase_admin.exceptions import FirebaseError
from rest_framework import authentication, exceptions

from apps.authentication.firebase import get_firebase_app

logger = logging.getLogger("vsdc_gateway.auth")


class FirebaseUser:
    """Authenticated identity built from decoded token claims."""

    is_authenticated = True
    is_anonymous     = False
    is_active        = True
    is_staff         = False

    def __init__(self, claims: dict):
        self.claims = dict(claims)
        self.uid    = self.claims.get("uid") or self.claims.get("sub")
        self.email  = self.claims.get("email")

    @property
    def pk(self):
        return self.uid

    id = pk

    def __str__(self):
        return self.email or self.uid or "firebase-user"


class FirebaseAuthentication(authentication.BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        header = request.META.get("HTTP_AUTHORIZATION", "")
        if not header.startswith(f"{self.keyword} "):
            # Anonymous; IsAuthenticated turns this into a 401 for protected views
            return None

        token = header.split(" ", 1)[1].strip()
        if not token:
            raise exceptions.AuthenticationFailed("Invalid token")

        try:
            claims = firebase_auth.verify_id_token(token, app=get_firebase_app())
        except (FirebaseError, ValueError) as exc:
            logger.warning("Token verification failed: %s", exc)
            raise exceptions.AuthenticationFailed("Invalid token")

        return FirebaseUser(claims), token

    def authenticate_header(self, request):
        return self.keyword
