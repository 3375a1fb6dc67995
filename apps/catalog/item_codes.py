"""
Item code generation (RRA VSDC item code format) and item-registration field checks.

    Country(2) + ProductType(1) + PackagingUnit(2) + QuantityUnit(2) + Sequence(7)
    e.g. RW2NTU0000012

Generated sequences are drawn from the non-cryptographic `random` module and
are NOT unique. By the birthday bound, 1,000 codes sharing one prefix collide
with probability ~5%, 3,000 with ~36%. Uniqueness is the caller's job
(see ItemService.register_item).
"""

import random
from decimal import Decimal

SEQUENCE_WIDTH = 7
SEQUENCE_SPACE = 10 ** SEQUENCE_WIDTH

CODE_FORMAT = "Country(2) + ProductType(1) + PackagingUnit(2) + QuantityUnit(2) + Sequence(7)"

# field -> (min, max) length; quantity units such as "U" are one character
FIELD_WIDTHS = {
    "orgnNatCd": (2, 2),
    "itemTyCd":  (1, 1),
    "pkgUnitCd": (2, 2),
    "qtyUnitCd": (1, 2),
}

ITEM_REQUIRED_FIELDS = (
    "tin", "bhfId", "itemCd", "itemClsCd", "itemTyCd", "itemNm",
    "orgnNatCd", "pkgUnitCd", "qtyUnitCd", "taxTyCd", "dftPrc",
    "isrcAplcbYn", "useYn", "regrNm", "regrId", "modrNm", "modrId",
)


class InvalidFieldWidth(ValueError):
    """A component code does not have the width the item code format requires."""

    def __init__(self, field, value, width):
        self.field = field
        self.value = value
        self.width = width
        low, high = width
        expected = str(low) if low == high else f"{low}-{high}"
        super().__init__(
            f"{field} must be {expected} character(s), got {value!r}"
        )


def _as_code(value):
    # JSON clients send numeric codes such as itemTyCd 2
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def random_sequence() -> str:
    return str(random.randrange(SEQUENCE_SPACE)).zfill(SEQUENCE_WIDTH)


def generate_item_code(
    orgn_nat_cd="RW",
    item_ty_cd="2",
    pkg_unit_cd="NT",
    qty_unit_cd="U",
    sequence=None,
    strict=True,
) -> str:
    """
    Build an item code from its component codes.

    A missing sequence is replaced by a random zero-padded 7-digit one.
    A supplied sequence is used as-is, without padding.
    With strict=True (default) component widths are checked and
    InvalidFieldWidth is raised; strict=False concatenates whatever it gets.
    """
    components = tuple(
        (field, _as_code(value)) for field, value in (
            ("orgnNatCd", orgn_nat_cd),
            ("itemTyCd",  item_ty_cd),
            ("pkgUnitCd", pkg_unit_cd),
            ("qtyUnitCd", qty_unit_cd),
        )
    )
    if strict:
        for field, value in components:
            low, high = FIELD_WIDTHS[field]
            if not isinstance(value, str) or not low <= len(value) <= high:
                raise InvalidFieldWidth(field, value, FIELD_WIDTHS[field])

    if not sequence:
        sequence = random_sequence()

    return "".join(str(value) for _, value in components) + str(sequence)


def is_present(value) -> bool:
    """Falsy values are missing, except numeric zero (a price may be 0)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value == value    # NaN is missing
    return bool(value)


def missing_required_fields(payload, required=ITEM_REQUIRED_FIELDS) -> list:
    """Names of required fields absent from payload, in declaration order."""
    return [field for field in required if not is_present(payload.get(field))]
