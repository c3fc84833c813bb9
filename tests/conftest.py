from __future__ import annotations

import os
import sys
import tempfile
import zipfile
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

import pytest
from openpyxl import Workbook

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep test logs out of the user's home directory.
os.environ.setdefault("SCHEDULE_IO_LOG_DIR", tempfile.mkdtemp(prefix="schedule_io_logs_"))

import schedule_io  # noqa: E402,F401  configure logging before CliRunner swaps streams

WorkbookFactory = Callable[..., Path]

EXCEL_LINE_BREAK = "_x000D_\n"


def _write_excel_line_breaks(path: Path, token: str) -> None:
    """Replace ``token`` in the workbook XML with the break Excel stores for CRLF."""

    with zipfile.ZipFile(path) as source:
        parts = [(info, source.read(info.filename)) for info in source.infolist()]
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as target:
        for info, data in parts:
            if info.filename.endswith(".xml"):
                data = data.replace(token.encode("utf-8"), EXCEL_LINE_BREAK.encode("utf-8"))
            target.writestr(info, data)


@pytest.fixture
def make_workbook(tmp_path: Path) -> WorkbookFactory:
    """Build an .xlsx whose first sheet holds ``cells`` ({"D6": value, ...}).

    ``excel_line_breaks`` names a token that is rewritten to ``_x000D_\\n`` in
    the saved XML, the way Excel itself persists an in-cell CRLF.
    """

    def _make(
        cells: dict[str, Any],
        *,
        name: str = "schedule.xlsx",
        extra_sheets: Sequence[str] = (),
        excel_line_breaks: Optional[str] = None,
    ) -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = "Schedule"
        for address, value in cells.items():
            ws[address] = value
        for title in extra_sheets:
            other = wb.create_sheet(title)
            other["A1"] = 44197
            other["A2"] = "Лекция\nИнформатика\n100"
        path = tmp_path / name
        wb.save(path)
        if excel_line_breaks:
            _write_excel_line_breaks(path, excel_line_breaks)
        return path

    return _make
