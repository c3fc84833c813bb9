"""Shared schemas for raw sheets, coordinates and schedule output."""

# Module responsibilities:
# - Define zero-indexed coordinate containers decoded from A1 addresses.
# - Provide output records whose to_dict() payloads serialize cleanly to JSON.

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Union

CellValue = Union[int, float, str, bool, date, datetime, None]
RawSheet = Sequence[Sequence[CellValue]]
Column = List[CellValue]


@dataclass(frozen=True)
class CellCoordinate:
    """Zero-indexed cell position (``"D6"`` -> row 5, column 3)."""

    row: int
    column: int


@dataclass(frozen=True)
class Rectangle:
    """Inclusive, axis-aligned region bounded by two corners."""

    top_left: CellCoordinate
    bottom_right: CellCoordinate

    @property
    def width(self) -> int:
        return self.bottom_right.column - self.top_left.column + 1

    @property
    def height(self) -> int:
        return self.bottom_right.row - self.top_left.row + 1


def _render_date(value: Optional[date], date_format: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if date_format:
        return value.strftime(date_format)
    return value.isoformat()


@dataclass(slots=True)
class ScheduleRecord:
    """One column of the schedule: the day it describes and its classes."""

    date: Optional[date] = None
    jobs: List[str] = field(default_factory=list)

    def to_dict(self, date_format: Optional[str] = None) -> Dict[str, Any]:
        return {
            "date": _render_date(self.date, date_format),
            "jobs": list(self.jobs),
        }


@dataclass(frozen=True)
class SubjectLegendEntry:
    """Column-wise legend entry listed under the schedule grid."""

    abbr: Optional[str]
    title: Optional[str]
    department: int
    lecturer: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "abbr": self.abbr,
            "title": self.title,
            "department": self.department,
            "lecturer": self.lecturer,
        }


@dataclass(frozen=True)
class CatalogEntry:
    """Row of the subject catalog table."""

    code: CellValue
    name: CellValue
    type: CellValue
    hours: CellValue

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "type": self.type,
            "hours": self.hours,
        }
