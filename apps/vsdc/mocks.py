"""
RRA-shaped mock payloads for the VSDC lookup endpoints.
Returned until the gateway is wired to the live EBM server.
"""

HEAD_OFFICE = "00"

DEFAULT_CUSTOMER_TIN = "100600570"

ITEM_CLASSES = (
    {"itemClsCd": "5059690800", "itemClsNm": "Food Products", "itemClsLvl": 1, "taxTyCd": "B", "mjtrTgYn": "Y", "useYn": "Y"},
    {"itemClsCd": "5022110801", "itemClsNm": "Beverages",     "itemClsLvl": 1, "taxTyCd": "B", "mjtrTgYn": "Y", "useYn": "Y"},
    {"itemClsCd": "1110160600", "itemClsNm": "Grains",        "itemClsLvl": 2, "taxTyCd": "B", "mjtrTgYn": "N", "useYn": "Y"},
    {"itemClsCd": "1110170400", "itemClsNm": "Vegetables",    "itemClsLvl": 2, "taxTyCd": "A", "mjtrTgYn": "N", "useYn": "Y"},
)


def init_info(tin, bhf_id) -> dict:
    head_office = bhf_id == HEAD_OFFICE
    return {
        "info": {
            "tin":              tin,
            "taxprNm":          "Test VSDC User",
            "bsnsActv":         "School Feeding Program",
            "bhfId":            bhf_id,
            "bhfNm":            "Headquarter" if head_office else f"Branch {bhf_id}",
            "bhfOpenDt":        "20210101",
            "prvncNm":          "KIGALI CITY",
            "dstrtNm":          "GASABO",
            "sctrNm":           "JALI",
            "locDesc":          "KN 5 St.",
            "hqYn":             "Y" if head_office else "N",
            "mgrNm":            "School Manager",
            "mgrTelNo":         "0780000000",
            "mgrEmail":         "school@test.com",
            "sdcId":            None,
            "mrcNo":            None,
            "dvcId":            f"{tin}7006310",
            "intrlKey":         None,
            "signKey":          None,
            "cmcKey":           None,
            "lastPchsInvcNo":   0,
            "lastSaleRcptNo":   0,
            "lastInvcNo":       None,
            "lastSaleInvcNo":   0,
            "lastTrainInvcNo":  None,
            "lastProfrmInvcNo": None,
            "lastCopyInvcNo":   None,
        }
    }


def item_classes() -> dict:
    return {"itemClsList": [dict(row) for row in ITEM_CLASSES]}


def customers(custm_tin=None) -> dict:
    return {
        "custList": [{
            "tin":         custm_tin or DEFAULT_CUSTOMER_TIN,
            "taxprNm":     "Customer Name",
            "taxprSttsCd": "A",
            "prvncNm":     "KIGALI CITY",
            "dstrtNm":     "KICUKIRO",
            "sctrNm":      "KAGARAMA",
            "locDesc":     "Kicukiro",
        }]
    }


def branches(tin) -> dict:
    return {
        "bhfList": [{
            "tin":       tin,
            "bhfId":     HEAD_OFFICE,
            "bhfNm":     "Headquarter",
            "bhfSttsCd": "01",
            "prvncNm":   "KIGALI CITY",
            "dstrtNm":   "GASABO",
            "sctrNm":    "KACYIRU",
            "locDesc":   None,
            "mgrNm":     "Manager Name",
            "mgrTelNo":  "0789000000",
            "mgrEmail":  "head@test.com",
            "hqYn":      "Y",
        }]
    }


def invoice_counters(last_sale_invc_no=0, last_sale_rcpt_no=0) -> dict:
    return {
        "lastSaleInvcNo":   last_sale_invc_no,
        "lastSaleRcptNo":   last_sale_rcpt_no,
        "lastPchsInvcNo":   0,
        "lastInvcNo":       None,
        "lastTrainInvcNo":  None,
        "lastProfrmInvcNo": None,
        "lastCopyInvcNo":   None,
    }
