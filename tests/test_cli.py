"""Tests for the typer command surface."""

import sys
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from commerce_validator_cli import cli, collaborator
from commerce_validator_cli.errors import ConfigurationError

runner = CliRunner()


class _Loader:
    def __init__(self, calls: list[str]) -> None:
        self._calls = calls

    async def load_from_file_system(self, path: str) -> None:
        self._calls.append(path)


class _Report:
    def get_items(self) -> list[dict[str, Any]]:
        return [
            {"name": "Schema", "tested": True, "pass": True, "message": "ok"},
            {"name": "Textures", "tested": False, "pass": False, "message": ""},
        ]


class _Validator:
    version = "2.0.0"

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.decimal_display_precision = 0
        self.schema = _Loader(self.calls)
        self.model = _Loader(self.calls)
        self.product_info = _Loader(self.calls)
        self.report = _Report()

    def generate_report(self) -> None:
        self.calls.append("generate_report")


@pytest.fixture
def validator(monkeypatch: pytest.MonkeyPatch) -> _Validator:
    instance = _Validator()
    monkeypatch.setattr(
        cli, "load_validator_factory", lambda reference: lambda: instance
    )
    monkeypatch.setattr(sys, "argv", ["/opt/validator/index.py"])
    return instance


def test_main_prints_report(validator: _Validator) -> None:
    result = runner.invoke(cli.app, ["schema.json", "model.glb", "info.json"])

    assert result.exit_code == 0
    assert validator.calls == [
        "/opt/validator/schema.json",
        "/opt/validator/model.glb",
        "/opt/validator/info.json",
        "generate_report",
    ]
    assert "* Version: 2.0.0" in result.stdout
    assert "  Schema: PASS       | ok" in result.stdout
    assert "Textures: NOT TESTED | " in result.stdout


def test_main_forwards_precision(validator: _Validator) -> None:
    result = runner.invoke(cli.app, ["--precision", "4", "schema.json", "model.glb"])

    assert result.exit_code == 0
    assert validator.decimal_display_precision == 4


def test_main_without_arguments_fails(validator: _Validator) -> None:
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 1
    assert (
        "ERROR: A schema and 3D model need to be provided as arguments"
        in result.stdout
    )
    assert "generate_report" not in validator.calls


def test_main_without_model_fails(validator: _Validator) -> None:
    result = runner.invoke(cli.app, ["schema.json"])

    assert result.exit_code == 1
    assert (
        "ERROR: A 3D model needs to be provided as the second argument"
        in result.stdout
    )
    assert validator.calls == []


def test_main_reports_missing_validator(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_validator(reference: str | None) -> Any:
        raise ConfigurationError("No validator configured")

    monkeypatch.setattr(cli, "load_validator_factory", no_validator)

    result = runner.invoke(cli.app, ["schema.json", "model.glb"])

    assert result.exit_code == 1
    assert "ERROR: No validator configured" in result.stdout


def test_main_reads_validator_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str | None] = []

    def capture(reference: str | None) -> Any:
        seen.append(reference)
        raise ConfigurationError("stop")

    monkeypatch.setattr(cli, "load_validator_factory", capture)

    runner.invoke(
        cli.app, ["schema.json", "model.glb"], env={"COMMERCE_VALIDATOR": "acme.v:Make"}
    )

    assert seen == ["acme.v:Make"]


def test_build_argv_stops_at_first_missing_value() -> None:
    assert cli.build_argv("/x/run.py", "a", None, "c") == ["/x/run.py", "a"]


def test_main_without_arguments_checks_before_validator_lookup(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(collaborator, "entry_points", lambda group: [])

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 1
    assert result.stdout == (
        "ERROR: A schema and 3D model need to be provided as arguments\n"
    )


def test_main_reports_validator_failing_at_import(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "broken_validator_plugin.py").write_text(
        "raise RuntimeError('plugin failed to start')\n"
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    result = runner.invoke(
        cli.app,
        ["--validator", "broken_validator_plugin:Validator", "s.json", "m.glb"],
    )

    assert result.exit_code == 1
    assert "ERROR: Could not load validator" in result.stdout
    assert "plugin failed to start" in result.stdout
