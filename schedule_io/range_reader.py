"""Excel input helpers."""

# Module responsibilities:
# - Validate the workbook path before any parsing happens.
# - Materialize the first worksheet as dense rows of raw values, row 0 included.
# - Emit structured logs for traceability.

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import List, Union

from openpyxl import load_workbook
from openpyxl.utils.escape import unescape
from openpyxl.utils.exceptions import InvalidFileException

from .errors import InvalidPathError, WorkbookReadError
from .schema import CellValue
from .utils.log import get_logger

logger = get_logger("range_reader")

PathLike = Union[str, Path]


def _decode(value: CellValue) -> CellValue:
    # openpyxl leaves Excel's _xHHHH_ escapes (e.g. _x000D_ for \r) in cell text.
    if isinstance(value, str):
        return unescape(value)
    return value


def ensure_workbook_path(path: PathLike) -> Path:
    """Return ``path`` as a Path, rejecting missing files and directories.

    Raises:
        InvalidPathError: When the path does not reference a regular file.
    """

    resolved = Path(path)
    if not resolved.exists() or resolved.is_dir():
        raise InvalidPathError(f"Path is not a file: {resolved}")
    return resolved


def read_sheet(path: PathLike) -> List[List[CellValue]]:
    """Load the first worksheet of a workbook as a list of rows.

    Coordinates stay aligned with A1 addresses: rows and columns start at A1
    even when the leading ones are blank. Trailing fully-empty rows are
    trimmed, so a sheet without values yields an empty list.

    Args:
        path: Path to the workbook.

    Returns:
        Rows of raw cell values (``None`` for empty cells).

    Raises:
        InvalidPathError: When the workbook path is missing or a directory.
        WorkbookReadError: When openpyxl cannot parse the file.
    """

    workbook_path = ensure_workbook_path(path)
    logger.info("Reading Excel workbook", extra={"path": str(workbook_path)})

    try:
        wb = load_workbook(workbook_path, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        logger.error("Failed to read Excel workbook", extra={"error": str(exc)})
        raise WorkbookReadError(f"Cannot read workbook {workbook_path}: {exc}") from exc

    try:
        ws = wb.worksheets[0]
        rows = [
            [_decode(value) for value in values]
            for values in ws.iter_rows(
                min_row=1,
                max_row=ws.max_row,
                min_col=1,
                max_col=ws.max_column,
                values_only=True,
            )
        ]
    finally:
        wb.close()

    while rows and all(value is None for value in rows[-1]):
        rows.pop()

    if not rows:
        logger.warning("Worksheet contains no data", extra={"path": str(workbook_path)})
        return []

    logger.info(
        "Excel workbook loaded",
        extra={"sheet": ws.title, "rows": len(rows), "columns": ws.max_column},
    )
    return rows
