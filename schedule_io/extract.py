"""Extraction entry points: reader -> selector -> classifier."""

# Module responsibilities:
# - Wire the range reader, rectangle selector and classifier into single calls.
# - Expose the legend and catalog readers that share the same reading path.
# - Convert schedule records into DataFrames for tabular export.

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import pandas as pd

from .classifier import EmptyCellPolicy, build_cells, build_records
from .config import ExtractionConfig
from .coordinates import decode_range
from .errors import ScheduleIOError
from .range_reader import PathLike, read_sheet
from .schema import CatalogEntry, CellValue, ScheduleRecord, SubjectLegendEntry
from .selector import cell_at, select_rectangle
from .utils.log import get_logger

logger = get_logger("extract")

DEFAULT_CATALOG_RANGE = "A39:O51"


def extract_schedule(
    path: PathLike,
    range_expression: str,
    config: Optional[ExtractionConfig] = None,
) -> List[ScheduleRecord]:
    """Extract one ScheduleRecord per column of ``range_expression``.

    Args:
        path: Workbook path; only the first sheet is read.
        range_expression: Inclusive A1 range such as ``"D6:Z34"``.
        config: Display strings and parsing knobs.

    Returns:
        Records ordered left to right. Empty for a sheet without data,
        otherwise exactly one record per column of the range.

    Raises:
        MalformedRangeError: When the range expression cannot be decoded.
        InvalidPathError: When the path is missing or a directory.
        WorkbookReadError: When the workbook cannot be parsed.
    """

    rectangle = decode_range(range_expression)
    raw = read_sheet(path)
    if not raw:
        return []
    columns = select_rectangle(raw, rectangle, clip_to_sheet=True)
    records = build_records(columns, config)
    logger.info(
        "Schedule extracted",
        extra={
            "range": range_expression,
            "records": len(records),
            "jobs": sum(len(record.jobs) for record in records),
        },
    )
    return records


def extract_cells(
    path: PathLike,
    range_expression: str,
    config: Optional[ExtractionConfig] = None,
    empty_cell_policy: Optional[EmptyCellPolicy] = None,
) -> List[List[str]]:
    """Extract the range as per-column display strings.

    Dates render with ``config.cell_date_format``. When ``empty_cell_policy``
    is None, empty cells are replaced by ``config.empty_placeholder``.
    Rows below the last populated sheet row are not emitted.
    """

    config = config or ExtractionConfig()
    if empty_cell_policy is None:
        empty_cell_policy = EmptyCellPolicy.placeholder(config.empty_placeholder)
    rectangle = decode_range(range_expression)
    raw = read_sheet(path)
    if not raw:
        return []
    return build_cells(
        select_rectangle(raw, rectangle, clip_to_sheet=True), config, empty_cell_policy
    )


def _truncate_int(value: CellValue) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return 0
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except (OverflowError, ValueError):
            return 0
    return 0


def _item(columns: Sequence[Sequence[CellValue]], column: int, index: int) -> Any:
    if column >= len(columns) or index >= len(columns[column]):
        return None
    return columns[column][index]


def read_subject_legend(path: PathLike, range_expression: str) -> List[SubjectLegendEntry]:
    """Read the column-wise subject legend (abbreviation, title, department, lecturer).

    Falsy cells (blank, empty or ``0``) are removed and empty columns dropped before pairing, so the
    first non-empty column decides how many entries are produced.
    """

    rectangle = decode_range(range_expression)
    raw = read_sheet(path)
    columns = select_rectangle(raw, rectangle, drop_empty_columns=True, clip_to_sheet=True)
    if not columns:
        logger.warning("Legend range holds no values", extra={"range": range_expression})
        return []

    entries = [
        SubjectLegendEntry(
            abbr=_item(columns, 0, index),
            title=_item(columns, 1, index),
            department=_truncate_int(_item(columns, 2, index)),
            lecturer=_item(columns, 3, index),
        )
        for index in range(len(columns[0]))
    ]
    logger.info("Subject legend read", extra={"range": range_expression, "entries": len(entries)})
    return entries


def read_subject_catalog(
    path: PathLike, range_expression: str = DEFAULT_CATALOG_RANGE
) -> List[CatalogEntry]:
    """Read the row-wise subject catalog (code, name, type, hours).

    Fields map to the first four columns of the range, so the table may sit
    anywhere on the sheet. Rows without a name are skipped.
    """

    try:
        rectangle = decode_range(range_expression)
        raw = read_sheet(path)
    except ScheduleIOError as exc:
        logger.error("Failed to read subject catalog", extra={"error": str(exc)})
        raise

    left = rectangle.top_left.column
    last_row = min(rectangle.bottom_right.row, len(raw) - 1)
    entries: List[CatalogEntry] = []
    for row in range(rectangle.top_left.row, last_row + 1):
        values = [
            cell_at(raw, row, left + offset) if offset < rectangle.width else None
            for offset in range(4)
        ]
        entry = CatalogEntry(code=values[0], name=values[1], type=values[2], hours=values[3])
        if entry.name:
            entries.append(entry)
    return entries


def records_to_frame(
    records: Sequence[ScheduleRecord], date_format: Optional[str] = None
) -> pd.DataFrame:
    """Flatten records into a DataFrame with one row per job.

    Columns without jobs keep a single row with an empty ``job`` so every
    column of the source range is represented.
    """

    rows = []
    for column, record in enumerate(records):
        payload = record.to_dict(date_format)
        for job in payload["jobs"] or [""]:
            rows.append({"column": column, "date": payload["date"], "job": job})
    return pd.DataFrame(rows, columns=["column", "date", "job"])
