"""Unit tests for BeadId validation."""

import pytest

from agld.domain.bead.model.value import BeadId
from agld.domain.shared.error import InvalidBeadIdError


class TestBeadIdParse:
    @pytest.mark.parametrize("raw", ["AB12CD34", "00000000", "ZZZZZZZZ", "A1B2C3D4"])
    def test_accepts_uppercase_alphanumeric(self, raw: str):
        assert str(BeadId.parse(raw)) == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "AB12CD3",  # 7 chars
            "AB12CD345",  # 9 chars
            "zz999999",  # lowercase
            "ab12cd34",
            "AB12-D34",
            "AB12 D34",
            " AB12CD34",
            "AB12CD34\n",
            "ÀB12CD34",
            "AB12CD3４",  # fullwidth digit
        ],
    )
    def test_rejects_malformed(self, raw: str):
        with pytest.raises(InvalidBeadIdError) as exc_info:
            BeadId.parse(raw)

        assert exc_info.value.code == "invalid_format"
        assert exc_info.value.bead_id == raw

    def test_does_not_normalise_case(self):
        with pytest.raises(InvalidBeadIdError):
            BeadId.parse("Ab12cd34")

    def test_is_immutable(self):
        bead_id = BeadId.parse("AB12CD34")
        with pytest.raises(Exception):
            bead_id.root = "ZZ999999"  # type: ignore[misc]
