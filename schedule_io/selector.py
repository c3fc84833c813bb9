"""Rectangle slicing over a materialized sheet."""

# Module responsibilities:
# - Cut an inclusive rectangle out of a RawSheet column by column.
# - Treat rows/cells outside the materialized sheet as empty instead of failing.

from __future__ import annotations

from typing import List

from .schema import CellValue, Column, RawSheet, Rectangle


def cell_at(raw: RawSheet, row: int, column: int) -> CellValue:
    """Return the value at ``(row, column)`` or ``None`` when out of bounds."""

    if row < 0 or column < 0 or row >= len(raw):
        return None
    cells = raw[row]
    if cells is None or column >= len(cells):
        return None
    return cells[column]


def select_rectangle(
    raw: RawSheet,
    rectangle: Rectangle,
    *,
    drop_empty_columns: bool = False,
    clip_to_sheet: bool = False,
) -> List[Column]:
    """Slice ``rectangle`` out of ``raw`` as a list of columns.

    Args:
        raw: Materialized sheet rows.
        rectangle: Inclusive region to extract.
        drop_empty_columns: When False (schedule route) every column is kept,
            ``None`` standing in for empty cells, so the output always holds
            ``rectangle.width`` columns. When True (legend route) falsy cells
            (``None``, ``""``, ``0``) are removed and columns left without
            values are dropped.
        clip_to_sheet: Stop each column at the last materialized row instead
            of padding it with ``None`` down to the rectangle's bottom edge.
            The column count is unaffected.

    Returns:
        Columns ordered left to right, each ordered top to bottom.
    """

    last_row = rectangle.bottom_right.row
    if clip_to_sheet:
        last_row = min(last_row, len(raw) - 1)
    rows = range(rectangle.top_left.row, last_row + 1)

    columns: List[Column] = []
    for column in range(rectangle.top_left.column, rectangle.bottom_right.column + 1):
        values = [cell_at(raw, row, column) for row in rows]
        if drop_empty_columns:
            values = [value for value in values if value]
            if not values:
                continue
        columns.append(values)
    return columns
