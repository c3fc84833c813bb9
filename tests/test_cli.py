"""CLI integration tests for schedule extraction."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from schedule_io import cli


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "schedule.yaml"
    path.write_text("preset: ru\n", encoding="utf-8")
    return path


@pytest.fixture
def workbook(make_workbook) -> Path:
    return make_workbook(
        {
            "D6": 44197,
            "D7": "Лекция\nФизика\n301",
            "E6": 44198,
            "B40": "ФИЗ",
            "D40": "Физика",
            "E40": 12,
            "F40": "Иванов И.И.",
        }
    )


def test_extract_json_with_default_config(cli_runner: CliRunner, workbook: Path) -> None:
    result = cli_runner.invoke(cli.app, ["extract", str(workbook), "D6:F10"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload == [
        {"date": "2021-01-01", "jobs": ["Type: Лекция, discipline: Физика, room: 301"]},
        {"date": "2021-01-02", "jobs": []},
        {"date": None, "jobs": []},
    ]


def test_extract_flat_to_file(cli_runner: CliRunner, workbook: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "cells.json"
    result = cli_runner.invoke(
        cli.app,
        [
            "extract",
            str(workbook),
            "D6:E7",
            "--shape",
            "flat",
            "--output",
            str(output),
        ],
    )
    assert result.exit_code == 0, result.output
    cells = json.loads(output.read_text(encoding="utf-8"))
    assert cells == [
        ["01.01.21", "Type: Лекция, discipline: Физика, room: 301"],
        ["02.01.21", "N/A"],
    ]


def test_extract_csv(cli_runner: CliRunner, workbook: Path, config_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "schedule.csv"
    result = cli_runner.invoke(
        cli.app,
        [
            "extract",
            str(workbook),
            "D6:E7",
            "--config",
            str(config_path),
            "--format",
            "csv",
            "--output",
            str(output),
        ],
    )
    assert result.exit_code == 0, result.output
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "column,date,job"
    assert len(lines) == 3


def test_extract_reports_bad_range(cli_runner: CliRunner, workbook: Path) -> None:
    result = cli_runner.invoke(cli.app, ["extract", str(workbook), "D6Z34"])
    assert result.exit_code == 1


def test_extract_reports_missing_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli.app, ["extract", str(tmp_path / "absent.xlsx"), "D6:Z34"])
    assert result.exit_code == 1


def test_extract_rejects_unknown_shape(cli_runner: CliRunner, workbook: Path) -> None:
    result = cli_runner.invoke(cli.app, ["extract", str(workbook), "D6:Z34", "--shape", "grid"])
    assert result.exit_code != 0


def test_legend_command(cli_runner: CliRunner, workbook: Path) -> None:
    result = cli_runner.invoke(cli.app, ["legend", str(workbook), "A40:G40"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"abbr": "ФИЗ", "title": "Физика", "department": 12, "lecturer": "Иванов И.И."}
    ]


def test_catalog_command(cli_runner: CliRunner, workbook: Path) -> None:
    result = cli_runner.invoke(cli.app, ["catalog", str(workbook), "--range", "D40:G40"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"code": "Физика", "name": 12, "type": "Иванов И.И.", "hours": None}
    ]


def test_extract_with_russian_config(cli_runner: CliRunner, workbook: Path, config_path: Path) -> None:
    result = cli_runner.invoke(
        cli.app, ["extract", str(workbook), "D6:D7", "--config", str(config_path)]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"date": "2021-01-01", "jobs": ["Тип занятия: Лекция, дисциплина: Физика, аудитория: 301"]}
    ]


def test_extract_excel_crlf_cells_without_config(cli_runner: CliRunner, make_workbook) -> None:
    path = make_workbook(
        {"A1": 44197, "A2": "Лекция¦Физика¦301"}, name="excel.xlsx", excel_line_breaks="¦"
    )
    result = cli_runner.invoke(cli.app, ["extract", str(path), "A1:A2"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"date": "2021-01-01", "jobs": ["Type: Лекция, discipline: Физика, room: 301"]}
    ]
