from django.urls import path
from .views import (
    InitInfoView, SelectCodesView, SelectItemClassView, SelectCustomerView, SelectBranchesView,
    SaveSalesView, SaveStockItemsView, SaveStockMasterView, LastInvoiceView, DeviceInfoView,
)

urlpatterns = [
    path("initializer/selectInitInfo",       InitInfoView.as_view(),        name="vsdc-init"),
    path("code/selectCodes",                 SelectCodesView.as_view(),     name="vsdc-codes"),
    path("itemClass/selectItemsClass",       SelectItemClassView.as_view(), name="vsdc-item-class"),
    path("customers/selectCustomer",         SelectCustomerView.as_view(),  name="vsdc-customer"),
    path("branches/selectBranches",          SelectBranchesView.as_view(),  name="vsdc-branches"),
    path("trnsSales/saveSales",              SaveSalesView.as_view(),       name="vsdc-sales"),
    path("stock/saveStockItems",             SaveStockItemsView.as_view(),  name="vsdc-stock"),
    path("stockMaster/saveStockMaster",      SaveStockMasterView.as_view(), name="vsdc-stock-master"),
    path("last-invoice/<str:tin>",           LastInvoiceView.as_view(),     name="vsdc-last-invoice"),
    path("device-info/<str:tin>",            DeviceInfoView.as_view(),      name="vsdc-device-info"),
]
