"""Tests for sheetcalc A1 address helpers."""

from __future__ import annotations

import pytest

from sheetcalc import InvalidCellIndex
from sheetcalc._utils import a1_to_rowcol, column_index


class TestColumnIndex:
    def test_single_letters(self) -> None:
        assert column_index("A") == 1
        assert column_index("B") == 2
        assert column_index("Z") == 26

    def test_two_letters(self) -> None:
        assert column_index("AA") == 27
        assert column_index("AZ") == 52
        assert column_index("BA") == 53
        assert column_index("ZZ") == 702

    def test_three_letters(self) -> None:
        assert column_index("AAA") == 703


class TestA1ToRowCol:
    def test_top_left(self) -> None:
        assert a1_to_rowcol("A1") == (1, 1)

    def test_row_then_column(self) -> None:
        assert a1_to_rowcol("B12") == (12, 2)

    def test_multi_letter_column(self) -> None:
        assert a1_to_rowcol("AA3") == (3, 27)

    def test_row_with_inner_zero(self) -> None:
        assert a1_to_rowcol("C10") == (10, 3)

    @pytest.mark.parametrize(
        "address", ["a1", "A0", "A01", "1A", "A", "12", "", "A1 ", " A1", "A-1", "$A$1"],
    )
    def test_invalid(self, address: str) -> None:
        with pytest.raises(InvalidCellIndex) as exc_info:
            a1_to_rowcol(address)
        assert exc_info.value.address == address
        assert str(exc_info.value) == f"Invalid cell index '{address}'"
