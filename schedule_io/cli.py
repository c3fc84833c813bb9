"""Typer based command line entry points for schedule_io."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer

from .classifier import EmptyCellPolicy
from .config import ExtractionConfig, load_config
from .errors import ScheduleIOError
from .extract import (
    DEFAULT_CATALOG_RANGE,
    extract_cells,
    extract_schedule,
    read_subject_catalog,
    read_subject_legend,
    records_to_frame,
)
from .utils.log import get_logger, set_level

SHAPES = {"per-column", "flat"}
FORMATS = {"json", "csv"}

app = typer.Typer(help="Extract class schedules from spreadsheet ranges.")
logger = get_logger("cli")


def _validate_choice(value: str, allowed: set[str], option: str) -> str:
    value = value.lower()
    if value not in allowed:
        raise typer.BadParameter(f"{option} must be one of {', '.join(sorted(allowed))}")
    return value


def _load_config(config_path: Optional[Path]) -> ExtractionConfig:
    try:
        return load_config(config_path)
    except ScheduleIOError as exc:
        typer.secho(f"Unable to load configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.echo(f"Written: {output}")


def _dump_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)


def _fail(exc: ScheduleIOError) -> None:
    logger.error("Extraction failed: %s", exc)
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Set package logging level (e.g. DEBUG/INFO/WARNING).",
    ),
) -> None:
    """Configure global CLI behaviour before executing commands."""

    try:
        set_level(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("extract")
def extract_command(
    file: Path = typer.Argument(..., help="Workbook path; the first sheet is read."),
    range_expression: str = typer.Argument(..., metavar="RANGE", help="Inclusive range such as D6:Z34."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML file with display strings."),
    shape: str = typer.Option("per-column", "--shape", help="Output shape: per-column or flat."),
    fmt: str = typer.Option("json", "--format", help="Output format for per-column records: json or csv."),
    output: Optional[Path] = typer.Option(None, "--output", help="Write to a file instead of stdout."),
) -> None:
    """Extract one record per column of RANGE."""

    shape = _validate_choice(shape, SHAPES, "shape")
    fmt = _validate_choice(fmt, FORMATS, "format")
    if shape == "flat" and fmt == "csv":
        raise typer.BadParameter("CSV output is only available for the per-column shape")
    config = _load_config(config_path)

    try:
        if shape == "flat":
            cells = extract_cells(
                file,
                range_expression,
                config,
                EmptyCellPolicy.placeholder(config.empty_placeholder),
            )
            _emit(_dump_json(cells), output)
            return
        records = extract_schedule(file, range_expression, config)
    except ScheduleIOError as exc:
        _fail(exc)

    if fmt == "csv":
        frame = records_to_frame(records, config.date_format)
        _emit(frame.to_csv(index=False), output)
    else:
        _emit(_dump_json([record.to_dict(config.date_format) for record in records]), output)


@app.command("legend")
def legend_command(
    file: Path = typer.Argument(..., help="Workbook path; the first sheet is read."),
    range_expression: str = typer.Argument(..., metavar="RANGE", help="Legend block range."),
    output: Optional[Path] = typer.Option(None, "--output", help="Write to a file instead of stdout."),
) -> None:
    """Read the column-wise subject legend."""

    try:
        entries = read_subject_legend(file, range_expression)
    except ScheduleIOError as exc:
        _fail(exc)
    _emit(_dump_json([entry.to_dict() for entry in entries]), output)


@app.command("catalog")
def catalog_command(
    file: Path = typer.Argument(..., help="Workbook path; the first sheet is read."),
    range_expression: str = typer.Option(DEFAULT_CATALOG_RANGE, "--range", help="Catalog table range."),
    output: Optional[Path] = typer.Option(None, "--output", help="Write to a file instead of stdout."),
) -> None:
    """Read the row-wise subject catalog."""

    try:
        entries = read_subject_catalog(file, range_expression)
    except ScheduleIOError as exc:
        _fail(exc)
    _emit(_dump_json([entry.to_dict() for entry in entries]), output)


if __name__ == "__main__":
    app()
