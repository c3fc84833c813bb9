"""Cell classification and record building for schedule rectangles."""

# Module responsibilities:
# - Classify raw cell values as serial dates, multi-field class cells, empties or filler.
# - Fold classified columns into per-column ScheduleRecords or flat display strings.
# - Never raise on an individual cell: unknown shapes are dropped silently.

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .config import ExtractionConfig
from .schema import CellValue, Column, ScheduleRecord

SERIAL_EPOCH = date(1899, 12, 30)
MAX_SERIAL = (date(9999, 12, 31) - SERIAL_EPOCH).days


class CellKind(str, Enum):
    DATE = "date"
    JOB = "job"
    EMPTY = "empty"
    OTHER = "other"


class OutputShape(str, Enum):
    PER_COLUMN_RECORD = "per_column_record"
    FLAT_CELL_LIST = "flat_cell_list"


@dataclass(frozen=True)
class EmptyCellPolicy:
    """What the flat route does with empty cells: skip them or emit a placeholder."""

    placeholder_text: Optional[str] = None

    @classmethod
    def skip(cls) -> "EmptyCellPolicy":
        return cls()

    @classmethod
    def placeholder(cls, text: str) -> "EmptyCellPolicy":
        return cls(placeholder_text=text)

    @property
    def is_skip(self) -> bool:
        return self.placeholder_text is None


def _serial_value(value: CellValue) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        serial = value
    elif isinstance(value, float) and value.is_integer():
        serial = int(value)
    else:
        return None
    if 0 <= serial <= MAX_SERIAL:
        return serial
    return None


def decode_serial_date(serial: int) -> date:
    """Convert a spreadsheet serial day number into a calendar date.

    The epoch is 1899-12-30, which absorbs the 1900 leap-year quirk, so serial
    25569 is 1970-01-01 and 44197 is 2021-01-01.
    """

    return SERIAL_EPOCH + timedelta(days=serial)


def line_separator(text: str, config: ExtractionConfig) -> Optional[str]:
    """Return the break that splits ``text`` into fields, or None for single-line text."""

    if config.separator in text:
        return config.separator
    if config.accept_bare_newline and "\n" in text:
        return "\n"
    return None


def split_fields(text: str, config: ExtractionConfig) -> Tuple[str, str, str]:
    """Return ``(type, discipline, room)`` for a multi-field class cell."""

    parts = text.split(line_separator(text, config) or config.separator)

    def pick(index: int) -> str:
        if index < len(parts) and parts[index]:
            return parts[index]
        return config.not_specified

    if config.department_marker and config.department_marker in parts[0]:
        # Department-wide entries carry no discipline; the type doubles as one.
        return parts[0], parts[0], pick(1)
    return parts[0], pick(1), pick(2)


def classify_cell(
    value: CellValue, config: ExtractionConfig
) -> Tuple[CellKind, Union[date, str, None]]:
    """Classify one cell, returning its kind and decoded payload."""

    if value is None or value == "":
        return CellKind.EMPTY, None
    if isinstance(value, datetime):
        return CellKind.DATE, value.date()
    if isinstance(value, date):
        return CellKind.DATE, value
    serial = _serial_value(value)
    if serial is not None:
        return CellKind.DATE, decode_serial_date(serial)
    if isinstance(value, str) and line_separator(value, config):
        return CellKind.JOB, config.render_job(*split_fields(value, config))
    return CellKind.OTHER, None


def build_records(
    columns: Sequence[Column], config: Optional[ExtractionConfig] = None
) -> List[ScheduleRecord]:
    """Fold each column into one ScheduleRecord.

    The last date seen in a column wins; every class cell is appended to the
    column's jobs regardless of which date preceded it.
    """

    config = config or ExtractionConfig()
    records = [ScheduleRecord() for _ in columns]
    for record, column in zip(records, columns):
        for value in column:
            kind, payload = classify_cell(value, config)
            if kind is CellKind.DATE:
                record.date = payload  # type: ignore[assignment]
            elif kind is CellKind.JOB:
                record.jobs.append(payload)  # type: ignore[arg-type]
    return records


def build_cells(
    columns: Sequence[Column],
    config: Optional[ExtractionConfig] = None,
    empty_cell_policy: EmptyCellPolicy = EmptyCellPolicy(),
) -> List[List[str]]:
    """Render each column as a list of display strings."""

    config = config or ExtractionConfig()
    rendered: List[List[str]] = []
    for column in columns:
        cells: List[str] = []
        for value in column:
            kind, payload = classify_cell(value, config)
            if kind is CellKind.DATE:
                cells.append(payload.strftime(config.cell_date_format))  # type: ignore[union-attr]
            elif kind is CellKind.JOB:
                cells.append(payload)  # type: ignore[arg-type]
            elif kind is CellKind.EMPTY and not empty_cell_policy.is_skip:
                cells.append(empty_cell_policy.placeholder_text)  # type: ignore[arg-type]
        rendered.append(cells)
    return rendered


def build(
    columns: Sequence[Column],
    *,
    shape: OutputShape = OutputShape.PER_COLUMN_RECORD,
    empty_cell_policy: EmptyCellPolicy = EmptyCellPolicy(),
    config: Optional[ExtractionConfig] = None,
) -> Union[List[ScheduleRecord], List[List[str]]]:
    """Classify ``columns`` into the requested output shape.

    Raises:
        ValueError: When a placeholder policy is combined with per-column
            records; placeholders only exist in the flat route.
    """

    shape = OutputShape(shape)
    if shape is OutputShape.PER_COLUMN_RECORD:
        if not empty_cell_policy.is_skip:
            raise ValueError("Placeholder empty-cell policy only applies to the flat cell list shape")
        return build_records(columns, config)
    return build_cells(columns, config, empty_cell_policy)
