"""
VSDC code tables (RRA VSDC specification v1.0.4, section 4).
Read-only: built once at import and never mutated.
"""

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True)
class CodeDefinition:
    name:        str
    description: str
    rate:        Optional[int] = None    # tax types only
    direction:   Optional[str] = None    # stock in/out types only

    def as_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}


def _table(**rows) -> MappingProxyType:
    return MappingProxyType(rows)


def _plain(name, description=None):
    return CodeDefinition(name=name, description=description or name)


# ── Tax type (4.1) ────────────────────────────────────────────────────────────
TAX_TYPE = _table(
    A=CodeDefinition("A-EX",     "Tax Exempt",    rate=0),
    B=CodeDefinition("B-18.00%", "Standard Rate", rate=18),
    C=CodeDefinition("C",        "Zero Rated",    rate=0),
    D=CodeDefinition("D",        "Other",         rate=0),
)

# ── Product type (4.3) ────────────────────────────────────────────────────────
PRODUCT_TYPE = MappingProxyType({
    "1": _plain("Raw Material"),
    "2": _plain("Finished Product"),
    "3": _plain("Service", "Service without stock"),
})

# ── Packaging / quantity units (code classes 17 and 10) ──────────────────────
PACKAGING_UNIT = _table(
    AM=_plain("Ampoule"),
    BA=_plain("Barrel"),
    BG=_plain("Bag"),
    NT=_plain("Net"),
)

QUANTITY_UNIT = _table(
    KG=_plain("Kilogram"),
    L=_plain("Litre"),
    U=_plain("Pieces", "Pieces/Items"),
)

# ── Transaction / receipt types (4.8, 4.9) ────────────────────────────────────
TRANSACTION_TYPE = _table(
    C=_plain("Copy"),
    N=_plain("Normal"),
    P=_plain("Proforma", "Proforma invoice"),
    T=_plain("Training"),
)

SALES_RECEIPT_TYPE = _table(
    S=_plain("Sale"),
    R=_plain("Refund after Sale"),
)

# ── Payment method (4.10) ─────────────────────────────────────────────────────
PAYMENT_METHOD = MappingProxyType({
    "01": _plain("CASH"),
    "02": _plain("CREDIT"),
    "03": _plain("CASH/CREDIT"),
    "04": _plain("BANK CHECK", "BANK CHECK PAYMENT"),
    "05": _plain("DEBIT&CREDIT CARD", "PAYMENT USING CARD"),
    "06": _plain("MOBILE MONEY"),
    "07": _plain("OTHER", "OTHER MEANS OF PAYMENT"),
})

# ── Transaction progress (4.11) ───────────────────────────────────────────────
TRANSACTION_PROGRESS = MappingProxyType({
    "01": _plain("Wait for Approval"),
    "02": _plain("Approved"),
    "03": _plain("Cancel Requested"),
    "04": _plain("Canceled"),
    "05": _plain("Refunded"),
    "06": _plain("Transferred"),
})

REGISTRATION_TYPE = _table(
    A=_plain("Automatic"),
    M=_plain("Manual"),
)

# ── Stock in/out type (4.15) ──────────────────────────────────────────────────
STOCK_IN   = "IN"
STOCK_OUT  = "OUT"

STOCK_IN_OUT_TYPE = MappingProxyType({
    "01": CodeDefinition("Import",         "Incoming-Import",         direction=STOCK_IN),
    "02": CodeDefinition("Purchase",       "Incoming-Purchase",       direction=STOCK_IN),
    "03": CodeDefinition("Return",         "Incoming-Return",         direction=STOCK_IN),
    "04": CodeDefinition("Stock Movement", "Incoming-Stock Movement", direction=STOCK_IN),
    "05": CodeDefinition("Processing",     "Incoming-Processing",     direction=STOCK_IN),
    "06": CodeDefinition("Adjustment",     "Incoming-Adjustment",     direction=STOCK_IN),
    "11": CodeDefinition("Sale",           "Outgoing-Sale",           direction=STOCK_OUT),
    "12": CodeDefinition("Return",         "Outgoing-Return",         direction=STOCK_OUT),
    "13": CodeDefinition("Stock Movement", "Outgoing-Stock Movement", direction=STOCK_OUT),
    "14": CodeDefinition("Processing",     "Outgoing-Processing",     direction=STOCK_OUT),
    "15": CodeDefinition("Discarding",     "Outgoing-Discarding",     direction=STOCK_OUT),
    "16": CodeDefinition("Adjustment",     "Outgoing-Adjustment",     direction=STOCK_OUT),
})

# ── Refund reason (4.16) ──────────────────────────────────────────────────────
REFUND_REASON = MappingProxyType({
    "01": _plain("Missing Quantity"),
    "02": _plain("Missing Item"),
    "03": _plain("Damaged"),
    "04": _plain("Wasted"),
    "05": _plain("Raw Material Shortage"),
    "06": _plain("Refund"),
    "07": _plain("Wrong Customer TIN"),
    "08": _plain("Wrong Customer name"),
    "09": _plain("Wrong Amount/price"),
    "10": _plain("Wrong Quantity"),
    "11": _plain("Wrong Item(s)"),
    "12": _plain("Wrong tax type"),
    "13": _plain("Other reason"),
})


CODE_DEFINITIONS = MappingProxyType({
    "taxType":             TAX_TYPE,
    "productType":         PRODUCT_TYPE,
    "packagingUnit":       PACKAGING_UNIT,
    "quantityUnit":        QUANTITY_UNIT,
    "transactionType":     TRANSACTION_TYPE,
    "salesReceiptType":    SALES_RECEIPT_TYPE,
    "paymentMethod":       PAYMENT_METHOD,
    "transactionProgress": TRANSACTION_PROGRESS,
    "registrationType":    REGISTRATION_TYPE,
    "stockInOutType":      STOCK_IN_OUT_TYPE,
    "refundReasonCode":    REFUND_REASON,
})


# (cdCls, cdClsNm, cdClsDesc, userDfnNm1, table) — the classes served by /code/selectCodes
CODE_CLASSES = (
    ("04", "TaxType",        "Tax Type Codes",        "TaxRate", TAX_TYPE),
    ("10", "UnitOfQuantity", "Quantity Unit Codes",   None,      QUANTITY_UNIT),
    ("17", "PackagingUnit",  "Packaging Unit Codes",  None,      PACKAGING_UNIT),
    ("24", "ProductType",    "Product Type Codes",    None,      PRODUCT_TYPE),
    ("07", "PaymentMethod",  "Payment Method Codes",  None,      PAYMENT_METHOD),
)


def stock_direction(sar_ty_cd) -> Optional[str]:
    """Return "IN"/"OUT" for a stock in/out type code, None when unknown."""
    definition = STOCK_IN_OUT_TYPE.get(sar_ty_cd)
    return definition.direction if definition else None


def definitions_as_dict() -> dict:
    """Plain-dict copy of every table, for JSON responses."""
    return {
        table_name: {code: d.as_dict() for code, d in table.items()}
        for table_name, table in CODE_DEFINITIONS.items()
    }


def code_class_list() -> list:
    """Build the VSDC `cdsList` payload from the code tables."""
    cds_list = []
    for cd_cls, cls_name, cls_desc, user_dfn_nm1, table in CODE_CLASSES:
        dt_list = []
        for order, (code, definition) in enumerate(table.items(), start=1):
            dt_list.append({
                "cd":         code,
                "cdNm":       definition.name,
                "cdDesc":     definition.description,
                "useYn":      "Y",
                "srtOrd":     str(order),
                "userDfnCd1": str(definition.rate) if definition.rate is not None else None,
                "userDfnCd2": None,
                "userDfnCd3": None,
            })
        cds_list.append({
            "cdCls":      cd_cls,
            "cdClsNm":    cls_name,
            "cdClsDesc":  cls_desc,
            "useYn":      "Y",
            "userDfnNm1": user_dfn_nm1,
            "userDfnNm2": None,
            "userDfnNm3": None,
            "dtList":     dt_list,
        })
    return cds_list
