"""`schedule_io` top-level package exports the schedule extraction helpers."""

# Module responsibilities:
# - Re-export the reader, selector, classifier and extraction entry points so consumers have a stable API surface.
# - Provide package version for packaging.

from __future__ import annotations

from .classifier import (
    EmptyCellPolicy,
    OutputShape,
    build,
    build_cells,
    build_records,
    decode_serial_date,
)
from .config import ExtractionConfig, load_config
from .coordinates import decode_cell, decode_range
from .errors import (
    ConfigError,
    InvalidPathError,
    MalformedRangeError,
    ScheduleIOError,
    WorkbookReadError,
)
from .extract import (
    extract_cells,
    extract_schedule,
    read_subject_catalog,
    read_subject_legend,
    records_to_frame,
)
from .range_reader import read_sheet
from .schema import (
    CatalogEntry,
    CellCoordinate,
    Rectangle,
    ScheduleRecord,
    SubjectLegendEntry,
)
from .selector import select_rectangle

__all__ = [
    "CatalogEntry",
    "CellCoordinate",
    "ConfigError",
    "EmptyCellPolicy",
    "ExtractionConfig",
    "InvalidPathError",
    "MalformedRangeError",
    "OutputShape",
    "Rectangle",
    "ScheduleIOError",
    "ScheduleRecord",
    "SubjectLegendEntry",
    "WorkbookReadError",
    "build",
    "build_cells",
    "build_records",
    "decode_cell",
    "decode_range",
    "decode_serial_date",
    "extract_cells",
    "extract_schedule",
    "load_config",
    "read_sheet",
    "read_subject_catalog",
    "read_subject_legend",
    "records_to_frame",
    "select_rectangle",
]

__version__ = "0.1.0"
