"""A1 address decoding for cells and rectangles."""

from __future__ import annotations

from openpyxl.utils.cell import column_index_from_string, coordinate_from_string
from openpyxl.utils.exceptions import CellCoordinatesException

from .errors import MalformedRangeError
from .schema import CellCoordinate, Rectangle


def decode_cell(address: str) -> CellCoordinate:
    """Decode ``"D6"`` into ``CellCoordinate(row=5, column=3)``.

    Raises:
        MalformedRangeError: When the address is not ``<Letters><Row>``.
    """

    try:
        column_letters, row = coordinate_from_string(address.strip())
        column = column_index_from_string(column_letters)
    except (CellCoordinatesException, ValueError, AttributeError) as exc:
        raise MalformedRangeError(f"Invalid cell address: {address!r}") from exc
    return CellCoordinate(row=row - 1, column=column - 1)


def decode_range(expression: str) -> Rectangle:
    """Decode ``"D6:Z34"`` into a rectangle with top-left first.

    Raises:
        MalformedRangeError: When the separator is missing, either corner is
            invalid, or the corners are not ordered top-left to bottom-right.
    """

    if not isinstance(expression, str):
        raise MalformedRangeError(f"Range expression must be a string: {expression!r}")
    parts = expression.split(":")
    if len(parts) != 2:
        raise MalformedRangeError(
            f"Range expression must be '<start>:<end>', got {expression!r}"
        )
    top_left, bottom_right = (decode_cell(part) for part in parts)
    if top_left.row > bottom_right.row or top_left.column > bottom_right.column:
        raise MalformedRangeError(
            f"Range corners out of order (top-left must precede bottom-right): {expression!r}"
        )
    return Rectangle(top_left=top_left, bottom_right=bottom_right)
