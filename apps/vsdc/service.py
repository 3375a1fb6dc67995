"""
VSDC transaction bookkeeping — device initialisation, sales receipts, stock movements.

Everything lands in Firestore; the EBM server itself is only mocked here.
"""

import base64
import logging
import random
import time

from apps.catalog.codes import stock_direction
from apps.vsdc import mocks
from apps.vsdc.config import get_vsdc_config
from apps.vsdc.responses import result_dt
from apps.vsdc.store import get_document_store

logger = logging.getLogger("vsdc_gateway.vsdc")

INITIALIZATIONS  = "vsdc_initializations"
SALES            = "vsdc_sales"
STOCK_MOVEMENTS  = "vsdc_stock_movements"
STOCK_MASTER     = "vsdc_stock_master"


def _b64(text: str, length: int) -> str:
    return base64.b64encode(text.encode()).decode()[:length]


class TransactionService:
    """Dependencies are injected so tests can hand in an in-memory store."""

    def __init__(self, store=None, config=None):
        self._store  = store
        self._config = config

    @property
    def store(self):
        return self._store or get_document_store()

    @property
    def config(self):
        return self._config or get_vsdc_config()

    # ── /initializer/selectInitInfo ───────────────────────────────────────────
    def initialize_device(self, tin, bhf_id, dvc_sr_no, envelope: dict) -> None:
        self.store.set((INITIALIZATIONS, tin), {
            "tin":           tin,
            "bhfId":         bhf_id,
            "dvcSrNo":       dvc_sr_no,
            "initializedAt": self.store.server_timestamp(),
            "response":      envelope,
        }, merge=True)
        logger.info("Device %s initialised for TIN %s branch %s", dvc_sr_no, tin, bhf_id)

    def device_info(self, tin):
        """Initialisation record for tin, or None."""
        record = self.store.get((INITIALIZATIONS, tin))
        if record is None:
            return None
        return {
            "initialized":   True,
            "initializedAt": record.get("initializedAt"),
            "tin":           record.get("tin"),
            "bhfId":         record.get("bhfId"),
            "dvcSrNo":       record.get("dvcSrNo"),
        }

    # ── /trnsSales/saveSales ──────────────────────────────────────────────────
    def save_sales(self, sales_data: dict, seller_uid) -> dict:
        tin, invc_no = sales_data["tin"], sales_data["invcNo"]
        stamp   = int(time.time() * 1000)
        rcpt_no = random.randrange(10000)

        receipt = {
            "rcptNo":    rcpt_no,
            "intrlData": _b64(f"{tin}{invc_no}{stamp}", 30),
            "rcptSign":  _b64(f"{rcpt_no}{tin}{stamp}", 16),
        }
        self.store.add((SALES,), {
            **sales_data,
            "sellerUid": seller_uid,
            **receipt,
            "createdAt": self.store.server_timestamp(),
        })
        logger.info("Sale %s saved for TIN %s (receipt %s)", invc_no, tin, rcpt_no)

        # TODO: decrement inventory quantities per itemList once items carry their school path
        return {
            **receipt,
            "totRcptNo":        rcpt_no,
            "vsdcRcptPbctDate": result_dt(),
            "sdcId":            self.config.sdc_id,
            "mrcNo":            self.config.mrc_no,
        }

    def last_invoice(self, tin) -> dict:
        last = self.store.latest((SALES,), "tin", tin, order_by="invcNo")
        if not last:
            return mocks.invoice_counters()
        return mocks.invoice_counters(
            last_sale_invc_no=last.get("invcNo") or 0,
            last_sale_rcpt_no=last.get("rcptNo") or 0,
        )

    # ── /stock/saveStockItems ─────────────────────────────────────────────────
    def save_stock_items(self, stock_data: dict) -> str:
        direction = stock_direction(stock_data.get("sarTyCd"))
        if direction is None:
            logger.warning("Unknown stock in/out type %r for SAR %s",
                           stock_data.get("sarTyCd"), stock_data.get("sarNo"))
        doc_id = self.store.add((STOCK_MOVEMENTS,), {
            **stock_data,
            "direction": direction,
            "createdAt": self.store.server_timestamp(),
        })
        logger.info("Stock movement %s (%s) saved for TIN %s",
                    stock_data.get("sarNo"), direction, stock_data.get("tin"))
        return doc_id

    # ── /stockMaster/saveStockMaster ─────────────────────────────────────────
    def save_stock_master(self, data: dict) -> None:
        key = f"{data['tin']}-{data['bhfId']}-{data['itemCd']}"
        self.store.set((STOCK_MASTER, key), {
            **data,
            "updatedAt": self.store.server_timestamp(),
        }, merge=True)
        logger.info("Stock master %s set to %s", key, data["rsdQty"])
