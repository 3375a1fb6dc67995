from django.urls import path
from .views import (
    ItemSaveView, ItemSelectView, ItemSyncView, CodeDefinitionsView, GenerateItemCodeView,
)

urlpatterns = [
    path("items",                          ItemSaveView.as_view(),         name="item-save"),
    path("vsdc/items/selectItems",         ItemSelectView.as_view(),       name="item-select"),
    path("vsdc/sync-item/<str:item_cd>",   ItemSyncView.as_view(),         name="item-sync"),
    path("vsdc/codes",                     CodeDefinitionsView.as_view(),  name="code-definitions"),
    path("vsdc/generate-item-code",        GenerateItemCodeView.as_view(), name="generate-item-code"),
]
