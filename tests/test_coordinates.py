"""Unit tests for A1 address decoding."""

from __future__ import annotations

import pytest

from schedule_io.coordinates import decode_cell, decode_range
from schedule_io.errors import MalformedRangeError
from schedule_io.schema import CellCoordinate


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("A1", CellCoordinate(row=0, column=0)),
        ("D6", CellCoordinate(row=5, column=3)),
        ("Z34", CellCoordinate(row=33, column=25)),
        ("AA10", CellCoordinate(row=9, column=26)),
        ("$D$6", CellCoordinate(row=5, column=3)),
        ("d6", CellCoordinate(row=5, column=3)),
    ],
)
def test_decode_cell(address: str, expected: CellCoordinate) -> None:
    assert decode_cell(address) == expected


def test_decode_range_orders_corners() -> None:
    rectangle = decode_range("D6:Z34")
    assert rectangle.top_left == CellCoordinate(row=5, column=3)
    assert rectangle.bottom_right == CellCoordinate(row=33, column=25)
    assert rectangle.width == 23
    assert rectangle.height == 29


@pytest.mark.parametrize(
    "expression",
    ["D6Z34", "D6:Z34:AA40", "", "D:Z34", "6:Z34", "D0:Z34", "Z34:D6", "D34:Z6", "1D:Z34"],
)
def test_decode_range_rejects_malformed(expression: str) -> None:
    with pytest.raises(MalformedRangeError):
        decode_range(expression)


def test_malformed_range_is_value_error() -> None:
    with pytest.raises(ValueError):
        decode_range("no-separator")
