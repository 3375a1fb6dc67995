"""Ops health URLs."""
from django.urls import path
from .views import ServiceInfoView, HealthView, DeepHealthView

urlpatterns = [
    path("",                 ServiceInfoView.as_view(), name="service-info"),
    path("api/health",       HealthView.as_view(),      name="health"),
    path("api/health/deep",  DeepHealthView.as_view(),  name="health-deep"),
]
