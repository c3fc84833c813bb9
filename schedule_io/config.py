"""Display strings and parsing knobs for schedule extraction.

Provides the ``ExtractionConfig`` container with English and Russian presets,
plus a YAML loader so deployments can swap labels without code changes.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class ExtractionConfig:
    """Immutable settings shared by the classifier and the flat cell route.

    Attributes:
        separator: Line break separating fields inside a class cell.
        accept_bare_newline: Treat a lone line feed as a field break when the
            separator is absent from a cell.
        department_marker: Substring of the first field that switches to the
            ``type, type, room`` field layout.
        type_label: Label rendered before the class type.
        discipline_label: Label rendered before the discipline.
        room_label: Label rendered before the room.
        not_specified: Substitute for a missing field.
        empty_placeholder: Text emitted for empty cells by the placeholder policy.
        date_format: strftime pattern for ``ScheduleRecord.to_dict``; ISO when None.
        cell_date_format: strftime pattern for dates in the flat cell route.
    """

    separator: str = "\r\n"
    accept_bare_newline: bool = True
    department_marker: str = "СР"
    type_label: str = "Type"
    discipline_label: str = "discipline"
    room_label: str = "room"
    not_specified: str = "not specified"
    empty_placeholder: str = "N/A"
    date_format: Optional[str] = None
    cell_date_format: str = "%d.%m.%y"

    @classmethod
    def russian(cls) -> "ExtractionConfig":
        return cls(
            type_label="Тип занятия",
            discipline_label="дисциплина",
            room_label="аудитория",
            not_specified="Не указана",
            empty_placeholder="Сампо",
        )

    def render_job(self, type_: str, discipline: str, room: str) -> str:
        return (
            f"{self.type_label}: {type_}, "
            f"{self.discipline_label}: {discipline}, "
            f"{self.room_label}: {room}"
        )


PRESETS = {
    "en": ExtractionConfig,
    "ru": ExtractionConfig.russian,
}

_FIELD_NAMES = frozenset(f.name for f in fields(ExtractionConfig))
_BOOL_FIELDS = frozenset({"accept_bare_newline"})


def config_from_mapping(payload: Mapping[str, Any]) -> ExtractionConfig:
    """Build a config from a mapping with an optional ``preset`` key."""

    data: Dict[str, Any] = dict(payload)
    preset_name = str(data.pop("preset", "en")).lower()
    if preset_name not in PRESETS:
        raise ConfigError(
            f"Unknown preset {preset_name!r}; expected one of {', '.join(sorted(PRESETS))}"
        )
    if unknown := set(data) - _FIELD_NAMES:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    for key, value in data.items():
        if value is None and key == "date_format":
            continue
        if key in _BOOL_FIELDS:
            if not isinstance(value, bool):
                raise ConfigError(f"Configuration key {key!r} must be a boolean")
            continue
        if not isinstance(value, str):
            raise ConfigError(f"Configuration key {key!r} must be a string")
    if data.get("separator") == "":
        raise ConfigError("separator must not be empty")
    return replace(PRESETS[preset_name](), **data)


def load_config(path: Optional[Path] = None) -> ExtractionConfig:
    """Load an ``ExtractionConfig`` from YAML; defaults when ``path`` is None."""

    if path is None:
        return ExtractionConfig()
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ConfigError("Invalid configuration YAML structure (expected mapping)")
    return config_from_mapping(payload)
