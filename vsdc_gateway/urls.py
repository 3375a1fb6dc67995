"""VSDC Gateway root URL configuration."""

from django.conf import settings
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # OpenAPI / Interactive Docs
    path("api/schema/",  SpectacularAPIView.as_view(),       name="schema"),
    path("api/docs/",    SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    # Item master (POST /api/items, /api/vsdc/items/…, code helpers)
    path("api/",         include("apps.catalog.urls")),

    # VSDC lookups and transactions
    path("api/vsdc/",    include("apps.vsdc.urls")),

    # Legacy POS invoice
    path("api/",         include("apps.invoices.urls")),

    # Banner + health
    path("",             include("apps.ops.health_urls")),
]

# Prometheus metrics (production settings only)
if "django_prometheus" in settings.INSTALLED_APPS:
    urlpatterns += [path("", include("django_prometheus.urls"))]
