"""
Item code generator + required-field validator.

Run:
    pytest tests/test_item_codes.py -v
"""

import math
from unittest.mock import patch

import pytest

from apps.catalog.item_codes import (
    ITEM_REQUIRED_FIELDS, InvalidFieldWidth, generate_item_code, is_present,
    missing_required_fields, random_sequence,
)


@pytest.fixture
def complete_item():
    return {
        "tin": "123", "bhfId": "00", "itemCd": "RW2NTU0000012", "itemClsCd": "5059690800",
        "itemTyCd": "2", "itemNm": "Maize flour", "orgnNatCd": "RW", "pkgUnitCd": "NT",
        "qtyUnitCd": "U", "taxTyCd": "B", "dftPrc": 0, "isrcAplcbYn": "N", "useYn": "Y",
        "regrNm": "Admin", "regrId": "admin", "modrNm": "Admin", "modrId": "admin",
    }


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TESTS — Item Code Generator
# ═══════════════════════════════════════════════════════════════════════════════

class TestGenerateItemCode:

    def test_documentation_fixture(self):
        assert generate_item_code("RW", "2", "NT", "U", "0000012") == "RW2NTU0000012"

    def test_defaults(self):
        code = generate_item_code()
        assert code.startswith("RW2NTU")
        assert len(code) == 13

    @pytest.mark.parametrize("item_ty_cd", ["1", "2", "3"])
    @pytest.mark.parametrize("pkg_unit_cd", ["NT", "BG", "BA", "AM"])
    def test_single_char_quantity_unit_gives_13_chars(self, item_ty_cd, pkg_unit_cd):
        assert len(generate_item_code("RW", item_ty_cd, pkg_unit_cd, "U")) == 13

    @pytest.mark.parametrize("qty_unit_cd", ["KG", "L", "U"])
    def test_generated_sequence_is_seven_digits(self, qty_unit_cd):
        code = generate_item_code("RW", "1", "BG", qty_unit_cd)
        sequence = code[5 + len(qty_unit_cd):]
        assert len(sequence) == 7
        assert sequence.isdigit()

    def test_generated_sequence_is_zero_padded(self):
        with patch("apps.catalog.item_codes.random.randrange", return_value=42):
            assert generate_item_code() == "RW2NTU0000042"

    def test_random_sequence_bounds(self):
        with patch("apps.catalog.item_codes.random.randrange", return_value=0):
            assert random_sequence() == "0000000"
        with patch("apps.catalog.item_codes.random.randrange", return_value=9_999_999):
            assert random_sequence() == "9999999"

    def test_explicit_sequence_is_deterministic(self):
        codes = {generate_item_code("RW", "2", "NT", "U", "0000042") for _ in range(50)}
        assert codes == {"RW2NTU0000042"}

    def test_caller_sequence_is_not_repadded(self):
        assert generate_item_code("RW", "2", "NT", "U", "42") == "RW2NTU42"

    def test_random_codes_differ(self):
        codes = [generate_item_code() for _ in range(100)]
        assert len(set(codes)) > 1

    @pytest.mark.parametrize("kwargs,field", [
        ({"orgn_nat_cd": "RWA"}, "orgnNatCd"),
        ({"orgn_nat_cd": "R"},   "orgnNatCd"),
        ({"item_ty_cd": "22"},   "itemTyCd"),
        ({"item_ty_cd": ""},     "itemTyCd"),
        ({"pkg_unit_cd": "N"},   "pkgUnitCd"),
        ({"qty_unit_cd": "KGS"}, "qtyUnitCd"),
        ({"qty_unit_cd": ""},    "qtyUnitCd"),
        ({"item_ty_cd": 22},     "itemTyCd"),
        ({"item_ty_cd": True},   "itemTyCd"),
    ])
    def test_wrong_width_raises(self, kwargs, field):
        with pytest.raises(InvalidFieldWidth) as exc_info:
            generate_item_code(**kwargs)
        assert exc_info.value.field == field
        assert isinstance(exc_info.value, ValueError)

    def test_width_error_message(self):
        with pytest.raises(InvalidFieldWidth, match="orgnNatCd must be 2 character"):
            generate_item_code(orgn_nat_cd="RWA")

    def test_numeric_type_code_accepted(self):
        assert generate_item_code("RW", 2, "NT", "U", "0000012") == "RW2NTU0000012"

    def test_permissive_mode_concatenates_anything(self):
        assert generate_item_code("RWA", "22", "N", "KGS", "1", strict=False) == "RWA22NKGS1"


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TESTS — Required-Field Validator
# ═══════════════════════════════════════════════════════════════════════════════

class TestRequiredFields:

    def test_seventeen_fields_in_declaration_order(self):
        assert len(ITEM_REQUIRED_FIELDS) == 17
        assert ITEM_REQUIRED_FIELDS[0] == "tin"
        assert ITEM_REQUIRED_FIELDS[-1] == "modrId"

    def test_complete_payload_has_nothing_missing(self, complete_item):
        assert missing_required_fields(complete_item) == []

    def test_zero_price_is_present(self, complete_item):
        assert "dftPrc" not in missing_required_fields(complete_item)

    def test_empty_name_is_the_only_missing_field(self, complete_item):
        complete_item["itemNm"] = ""
        assert missing_required_fields(complete_item) == ["itemNm"]

    def test_missing_fields_keep_declaration_order(self, complete_item):
        for field in ("modrId", "tin", "itemNm"):
            del complete_item[field]
        assert missing_required_fields(complete_item) == ["tin", "itemNm", "modrId"]

    def test_empty_payload_lists_every_field(self):
        assert missing_required_fields({}) == list(ITEM_REQUIRED_FIELDS)

    def test_custom_required_set(self):
        assert missing_required_fields({"a": 1}, required=("a", "b")) == ["b"]

    @pytest.mark.parametrize("value", [None, "", False, [], {}, math.nan])
    def test_falsy_values_are_missing(self, value):
        assert not is_present(value)

    @pytest.mark.parametrize("value", [0, 0.0, "0", "N", True, 1500])
    def test_present_values(self, value):
        assert is_present(value)
