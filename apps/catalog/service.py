"""
ItemService — item master registration and EBM synchronisation.

Flow:  register_item  →  (vsdc_items, inventory)  →  sync_item  →  EBM /items/saveItems
                                                        ↑
                                      manual endpoint or sync_item_to_ebm task
"""

import logging

from rest_framework import serializers

from apps.catalog.item_codes import generate_item_code
from apps.vsdc.config import get_vsdc_config
from apps.vsdc.connectors import VSDCConnector
from apps.vsdc.store import get_document_store

logger = logging.getLogger("vsdc_gateway.items")

VSDC_ITEMS = "vsdc_items"
INVENTORY  = "inventory"

# Fields forwarded to EBM /items/saveItems, in RRA field order
EBM_ITEM_FIELDS = (
    "tin", "bhfId", "itemCd", "itemClsCd", "itemTyCd", "itemNm", "itemStdNm",
    "orgnNatCd", "pkgUnitCd", "qtyUnitCd", "taxTyCd", "btchNo", "bcd",
    "dftPrc", "grpPrcL1", "grpPrcL2", "grpPrcL3", "grpPrcL4", "grpPrcL5",
    "addInfo", "sftyQty", "isrcAplcbYn", "useYn",
    "regrNm", "regrId", "modrNm", "modrId",
)

LISTED_ITEM_FIELDS = (
    "tin", "itemClsCd", "itemTyCd", "itemNm", "itemStdNm", "orgnNatCd",
    "pkgUnitCd", "qtyUnitCd", "taxTyCd", "btchNo", "bcd", "dftPrc",
    "grpPrcL1", "grpPrcL2", "grpPrcL3", "grpPrcL4", "grpPrcL5",
    "addInfo", "sftyQty", "isrcAplcbYn", "useYn",
)

MAX_CODE_ATTEMPTS = 5


def inventory_path(admin_id, district_id, school_id, item_cd=None):
    path = ("admin", admin_id, "district", district_id, "school", school_id, INVENTORY)
    return path + (item_cd,) if item_cd else path


def _number(data, field, default=None):
    value = data.get(field)
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise serializers.ValidationError({field: "A valid number is required."})
    try:
        return float(value) if not isinstance(value, int) else value
    except (TypeError, ValueError):
        raise serializers.ValidationError({field: "A valid number is required."})


def build_item_document(data: dict, item_cd: str, created_by, timestamp) -> dict:
    """Normalise a registration payload into the stored item master record."""
    return {
        "tin":         data.get("tin"),
        "bhfId":       data.get("bhfId") or "00",
        "itemCd":      item_cd,
        "itemClsCd":   data.get("itemClsCd"),
        "itemTyCd":    data.get("itemTyCd"),
        "itemNm":      data.get("itemNm"),
        "itemStdNm":   data.get("itemStdNm") or None,
        "orgnNatCd":   data.get("orgnNatCd") or "RW",
        "pkgUnitCd":   data.get("pkgUnitCd"),
        "qtyUnitCd":   data.get("qtyUnitCd"),
        "taxTyCd":     data.get("taxTyCd") or "B",
        "btchNo":      data.get("btchNo") or None,
        "bcd":         data.get("bcd") or None,
        "dftPrc":      _number(data, "dftPrc"),
        **{f"grpPrcL{n}": _number(data, f"grpPrcL{n}") for n in range(1, 6)},
        "addInfo":     data.get("addInfo") or None,
        "sftyQty":     _number(data, "sftyQty"),
        "isrcAplcbYn": data.get("isrcAplcbYn") or "N",
        "useYn":       data.get("useYn") or "Y",
        "regrNm":      data.get("regrNm"),
        "regrId":      data.get("regrId"),
        "modrNm":      data.get("modrNm"),
        "modrId":      data.get("modrId"),
        # local stock
        "quantity":    _number(data, "quantity", default=0),
        # EBM sync control
        "vsdcSynced":       False,
        "vsdcLastResult":   None,
        "vsdcSyncAttempts": 0,
        "createdAt":   timestamp,
        "updatedAt":   timestamp,
        "createdBy":   created_by,
    }


class ItemService:
    """
    Item master orchestration.
    Dependencies are injected so they can be swapped in tests.
    """

    def __init__(self, store=None, connector=None, config=None):
        self._store     = store
        self._connector = connector
        self._config    = config

    @property
    def store(self):
        return self._store or get_document_store()

    @property
    def connector(self):
        if self._connector is None:
            self._connector = VSDCConnector(self.config)
        return self._connector

    @property
    def config(self):
        return self._config or get_vsdc_config()

    # ── Item code ─────────────────────────────────────────────────────────────
    def new_item_code(self, orgn_nat_cd=None, item_ty_cd=None, pkg_unit_cd=None, qty_unit_cd=None) -> str:
        """
        Generate a code not yet present in vsdc_items.
        The generator itself promises no uniqueness, so collisions are re-drawn here.
        """
        parts = (orgn_nat_cd or "RW", item_ty_cd or "2", pkg_unit_cd or "NT", qty_unit_cd or "U")
        for _ in range(MAX_CODE_ATTEMPTS):
            item_cd = generate_item_code(*parts)
            if not self.store.exists((VSDC_ITEMS, item_cd)):
                return item_cd
            logger.warning("Generated item code %s already taken — retrying", item_cd)
        raise RuntimeError(f"Could not allocate a free item code after {MAX_CODE_ATTEMPTS} attempts")

    # ── Registration ──────────────────────────────────────────────────────────
    def register_item(self, data: dict, created_by) -> dict:
        """
        Persist a validated item under the school inventory and in vsdc_items.
        `data` must already carry itemCd and pass missing_required_fields.
        """
        item_cd = data["itemCd"]
        item = build_item_document(data, item_cd, created_by, self.store.server_timestamp())

        self.store.set(
            inventory_path(data["adminId"], data["districtId"], data["schoolId"], item_cd),
            item, merge=True,
        )
        self.store.set((VSDC_ITEMS, item_cd), {
            **item,
            "syncedToEbm":     False,
            "lastSyncAttempt": None,
        }, merge=True)
        logger.info("Item %s registered by %s", item_cd, created_by)

        if self.config.auto_sync:
            from apps.catalog.tasks import sync_item_to_ebm
            sync_item_to_ebm.delay(item_cd)
        return item

    # ── Listing ───────────────────────────────────────────────────────────────
    def list_items(self, tin) -> list:
        items = []
        for doc_id, doc in self.store.group_where_equal(INVENTORY, "tin", tin):
            row = {field: doc.get(field) for field in LISTED_ITEM_FIELDS}
            row["itemCd"] = doc_id
            for field in ("itemStdNm", "btchNo", "bcd", "addInfo"):
                row[field] = row[field] or None
            row["quantity"] = doc.get("quantity") or 0
            items.append(row)
        return items

    # ── EBM sync ──────────────────────────────────────────────────────────────
    def sync_item(self, item_cd):
        """
        Push one item to EBM and record the outcome on vsdc_items.
        Returns the connector result, or None when the item is unknown.
        """
        item = self.store.get((VSDC_ITEMS, item_cd))
        if item is None:
            return None

        result = self.connector.save_item({field: item.get(field) for field in EBM_ITEM_FIELDS})

        self.store.update((VSDC_ITEMS, item_cd), {
            "vsdcSynced":       result["success"],
            "syncedToEbm":      result["success"],
            "vsdcLastResult":   result,
            "vsdcSyncAttempts": self.store.increment(1),
            "lastSyncAttempt":  self.store.server_timestamp(),
        })
        if result["success"]:
            logger.info("Item %s synced to EBM", item_cd)
        else:
            logger.warning("Item %s EBM sync failed (%s)", item_cd, result["status"])
        return result
