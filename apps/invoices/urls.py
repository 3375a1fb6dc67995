from django.urls import path
from .views import LegacyInvoiceView

urlpatterns = [
    path("invoice", LegacyInvoiceView.as_view(), name="legacy-invoice"),
]
