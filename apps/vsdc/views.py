"""
VSDC API views (RRA VSDC specification v1.0.4, section 3.2.1).

Lookups answer with RRA-shaped mocks; transactions are recorded in Firestore.
"""

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.catalog.codes import code_class_list
from apps.vsdc import mocks, responses
from apps.vsdc import serializers as sz
from apps.vsdc.service import TransactionService

transactions = TransactionService()


# ── POST /api/vsdc/initializer/selectInitInfo (3.3.1.1) ───────────────────────
@extend_schema(tags=["VSDC"], summary="Initialise a VSDC device for a taxpayer branch")
class InitInfoView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = sz.InitInfoSerializer(data=request.data)
        if not ser.is_valid():
            return responses.parameter_error(
                "Missing tin, bhfId, or dvcSrNo",
                msg="Request parameter error: Missing required fields",
            )
        d = ser.validated_data

        response = responses.vsdc_success(mocks.init_info(d["tin"], d["bhfId"]))
        transactions.initialize_device(d["tin"], d["bhfId"], d["dvcSrNo"], response.data)
        return response


# ── POST /api/vsdc/code/selectCodes (3.3.2.1) ─────────────────────────────────
@extend_schema(tags=["VSDC"], summary="Code classifications")
class SelectCodesView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return responses.vsdc_success({"cdsList": code_class_list()})


# ── POST /api/vsdc/itemClass/selectItemsClass (3.3.2.2) ───────────────────────
@extend_schema(tags=["VSDC"], summary="Item classifications")
class SelectItemClassView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return responses.vsdc_success(mocks.item_classes())


# ── POST /api/vsdc/customers/selectCustomer (3.3.2.3) ─────────────────────────
@extend_schema(tags=["VSDC"], summary="Customer lookup by TIN")
class SelectCustomerView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = sz.CustomerLookupSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        return responses.vsdc_success(mocks.customers(ser.validated_data.get("custmTin")))


# ── POST /api/vsdc/branches/selectBranches (3.3.2.4) ──────────────────────────
@extend_schema(tags=["VSDC"], summary="Branch list")
class SelectBranchesView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = sz.LookupSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        return responses.vsdc_success(mocks.branches(ser.validated_data.get("tin")))


# ── POST /api/vsdc/trnsSales/saveSales (3.3.6.1) ──────────────────────────────
@extend_schema(tags=["VSDC"], summary="Save a sales transaction and issue receipt data")
class SaveSalesView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = sz.SalesSerializer(data=request.data)
        if not ser.is_valid():
            return responses.parameter_error("Missing required sales fields")

        sales_data = {**request.data, **ser.validated_data}
        receipt = transactions.save_sales(sales_data, seller_uid=request.user.uid)
        return responses.vsdc_success(receipt)


# ── POST /api/vsdc/stock/saveStockItems (3.3.8.2) ─────────────────────────────
@extend_schema(tags=["VSDC"], summary="Record a stock in/out movement")
class SaveStockItemsView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = sz.StockItemsSerializer(data=request.data)
        if not ser.is_valid():
            return responses.parameter_error("Missing required stock fields")

        transactions.save_stock_items({**request.data, **ser.validated_data})
        return responses.vsdc_success(None)


# ── POST /api/vsdc/stockMaster/saveStockMaster (3.3.8.3) ─────────────────────
@extend_schema(tags=["VSDC"], summary="Set the remaining quantity of an item")
class SaveStockMasterView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = sz.StockMasterSerializer(data=request.data)
        if not ser.is_valid():
            return responses.parameter_error("Missing required stock master fields")

        transactions.save_stock_master(ser.validated_data)
        return responses.vsdc_success(None)


# ── GET /api/vsdc/last-invoice/{tin} ──────────────────────────────────────────
@extend_schema(tags=["VSDC"], summary="Last sale invoice and receipt numbers for a TIN")
class LastInvoiceView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, tin):
        return responses.vsdc_success(transactions.last_invoice(tin))


# ── GET /api/vsdc/device-info/{tin} ───────────────────────────────────────────
@extend_schema(tags=["VSDC"], summary="Device initialisation status for a TIN")
class DeviceInfoView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, tin):
        info = transactions.device_info(tin)
        if info is None:
            return responses.not_found(
                "Device not initialized", "Device not initialized for this TIN",
            )
        return responses.vsdc_success(info)
