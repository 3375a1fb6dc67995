"""Legacy invoice endpoint kept for POS clients that predate the VSDC routes."""

import logging

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.vsdc.store import get_document_store

logger = logging.getLogger("vsdc_gateway.invoices")


def seller_sales_path(admin_id, district_id, school_id, seller_uid):
    return (
        "admin", admin_id, "district", district_id, "school", school_id,
        "seller", seller_uid, "sales",
    )


# ── POST /api/invoice ─────────────────────────────────────────────────────────
@extend_schema(tags=["Legacy"], summary="Save a POS invoice under the seller's school")
class LegacyInvoiceView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        seller_uid = request.user.uid
        invoice    = dict(request.data)

        admin_id    = invoice.get("adminId")
        district_id = invoice.get("districtId")
        school_id   = invoice.get("schoolId")
        if not admin_id or not district_id or not school_id:
            return Response(
                {"error": "Missing adminId, districtId or schoolId"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        buyer = invoice.get("buyer")
        if not isinstance(buyer, dict):
            buyer = {}
        logger.info("Invoice received from user %s", seller_uid)

        store = get_document_store()
        sale_id = store.add(seller_sales_path(admin_id, district_id, school_id, seller_uid), {
            **invoice,
            "buyerName":      buyer.get("name") or None,
            "buyerTinNumber": buyer.get("tin") or None,
            "buyerPhone":     buyer.get("phone") or None,
            "sellerUid":      seller_uid,
            "createdAt":      store.server_timestamp(),
        })

        return Response({
            "success":   True,
            "sellerUid": seller_uid,
            "saleId":    sale_id,
            "message":   "Invoice saved successfully",
        })
