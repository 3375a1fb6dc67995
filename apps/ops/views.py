"""
Operations views:
  - Service banner
  - Liveness health check
  - Deep health check (cache, disk, Firebase credentials)
"""

import os
import logging

from django.core.cache import cache
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema

from apps.vsdc.config import get_vsdc_config

logger = logging.getLogger("vsdc_gateway.ops")


# ── GET / ─────────────────────────────────────────────────────────────────────
@extend_schema(tags=["Ops"], summary="Service banner")
class ServiceInfoView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        config = get_vsdc_config()
        return Response({
            "service":       config.service_name,
            "version":       config.vsdc_version,
            "environment":   config.current_env,
            "status":        "running",
            "documentation": config.documentation,
        })


# ── GET /api/health ───────────────────────────────────────────────────────────
@extend_schema(tags=["Ops"], summary="Liveness check")
class HealthView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        config = get_vsdc_config()
        return Response({
            "status":      "healthy",
            "timestamp":   timezone.now().isoformat(),
            "environment": config.current_env,
            "vsdcApiUrl":  config.ebm_api_url,
        })


# ── GET /api/health/deep ──────────────────────────────────────────────────────
@extend_schema(tags=["Ops"], summary="Deep health check — cache, disk, Firebase")
class DeepHealthView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        checks = {}

        # Cache (Redis in production; backs throttling)
        try:
            cache.set("healthcheck", "1", 5)
            checks["cache"] = "ok" if cache.get("healthcheck") == "1" else "miss"
        except Exception as exc:
            checks["cache"] = f"error: {exc}"

        # Disk
        try:
            stat    = os.statvfs("/")
            free_gb = (stat.f_bavail * stat.f_frsize) / (1024 ** 3)
            checks["disk_free_gb"] = round(free_gb, 2)
            checks["disk"] = "ok" if free_gb > 1 else "low"
        except (AttributeError, OSError) as exc:
            checks["disk"] = f"error: {exc}"

        # Firebase credentials
        from apps.authentication.firebase import get_firebase_app
        try:
            get_firebase_app()
            checks["firebase"] = "ok"
        except (ImproperlyConfigured, ValueError) as exc:
            logger.warning("Deep health: Firebase unavailable: %s", exc)
            checks["firebase"] = f"error: {exc}"

        overall = "ok" if all(
            v == "ok" or isinstance(v, float) for v in checks.values()
        ) else "degraded"
        return Response({"status": overall, "checks": checks})
