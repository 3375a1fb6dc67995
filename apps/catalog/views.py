"""Item master API views — registration, listing, EBM sync, code helpers."""

import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.catalog import codes
from apps.catalog.item_codes import (
    CODE_FORMAT, ITEM_REQUIRED_FIELDS, InvalidFieldWidth, generate_item_code, is_present,
    missing_required_fields,
)
from apps.catalog.serializers import ItemCodeRequestSerializer, SchoolPathSerializer
from apps.catalog.service import ItemService
from apps.vsdc import responses
from apps.vsdc.serializers import LookupSerializer

logger = logging.getLogger("vsdc_gateway.items")
item_service = ItemService()


def _payload(request) -> dict:
    data = request.data
    return data.dict() if hasattr(data, "dict") else dict(data)


# ── POST /api/items ───────────────────────────────────────────────────────────
@extend_schema(tags=["Items"], summary="Register an item (VSDC /items/saveItems)")
class ItemSaveView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        data = _payload(request)
        generate = not is_present(data.get("itemCd"))

        # an absent itemCd is generated below, so it is never reported missing
        required = [f for f in ITEM_REQUIRED_FIELDS if not (generate and f == "itemCd")]
        missing = missing_required_fields(data, required)
        if missing:
            return responses.parameter_error(f"Missing required fields: {', '.join(missing)}")

        if generate:
            try:
                data["itemCd"] = item_service.new_item_code(
                    data.get("orgnNatCd"), data.get("itemTyCd"),
                    data.get("pkgUnitCd"), data.get("qtyUnitCd"),
                )
            except InvalidFieldWidth as exc:
                return responses.parameter_error(str(exc))

        SchoolPathSerializer(data=data).is_valid(raise_exception=True)

        item = item_service.register_item(data, created_by=request.user.uid)
        return responses.vsdc_success({
            "itemId":  item["itemCd"],
            "message": "Item saved successfully and ready for VSDC synchronization",
        })


# ── POST /api/vsdc/items/selectItems ─────────────────────────────────────────
@extend_schema(tags=["Items"], summary="List registered items for a taxpayer")
class ItemSelectView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = LookupSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        items = item_service.list_items(ser.validated_data.get("tin"))
        return responses.vsdc_success({"itemList": items})


# ── POST /api/vsdc/sync-item/{itemCd} ────────────────────────────────────────
@extend_schema(tags=["Items"], summary="Push a stored item to the EBM server")
class ItemSyncView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, item_cd):
        result = item_service.sync_item(item_cd)
        if result is None:
            return responses.not_found("Item not found")
        if result["success"]:
            return responses.vsdc_success(
                result["data"], msg="Item synced successfully to EBM", with_dt=False,
            )
        return responses.server_error(result["error"], msg="Failed to sync to EBM")


# ── GET /api/vsdc/codes ───────────────────────────────────────────────────────
@extend_schema(tags=["Codes"], summary="VSDC code tables")
class CodeDefinitionsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return responses.vsdc_success(codes.definitions_as_dict(), with_dt=False)


# ── POST /api/vsdc/generate-item-code ────────────────────────────────────────
@extend_schema(tags=["Codes"], summary="Generate an item code")
class GenerateItemCodeView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = ItemCodeRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        d = ser.validated_data
        try:
            item_code = generate_item_code(
                d.get("orgnNatCd") or "RW",
                d.get("itemTyCd") or "2",
                d.get("pkgUnitCd") or "NT",
                d.get("qtyUnitCd") or "U",
            )
        except InvalidFieldWidth as exc:
            return responses.parameter_error(str(exc))
        return responses.vsdc_success(
            {"itemCode": item_code, "format": CODE_FORMAT},
            msg="Item code generated", with_dt=False,
        )
