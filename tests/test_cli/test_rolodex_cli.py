"""Tests for rolodex.cli.

Exercises the Typer CLI app via CliRunner, covering the version flag, the
info and presets commands, and the render command (success and error
paths).
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rolodex import __version__
from rolodex.cli import app
from rolodex.formatters.plain import PlainTextFormatter
from tests.conftest import ORG_UUID, PERSON_UUID

runner = CliRunner()

RECORDS = [
    {
        "kind": "person",
        "uuid": PERSON_UUID,
        "name": "Jane Doe",
        "mail": [{"address": "jane@example.com", "priority": "primary"}],
        "phone": [{"label": "work", "number": "+1 555 0100"}],
        "organizations": [
            {
                "label": "employee",
                "organization_uuid": ORG_UUID,
                "organization_name": "Acme Corp",
                "record_uuid": PERSON_UUID,
                "record_name": "Jane Doe",
            }
        ],
    },
    {"kind": "organization", "uuid": ORG_UUID, "name": "Acme Corp", "domain": "acme.example"},
]


@pytest.fixture
def contacts_file(tmp_path: Path) -> Path:
    path = tmp_path / "contacts.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# main callback (--version)
# ---------------------------------------------------------------------------


class TestMainCallback:
    def test_version_flag_prints_version_and_exits(self) -> None:
        result = runner.invoke(app, ["--version", "info"])
        assert result.exit_code == 0
        assert "rolodex" in result.output
        assert __version__ in result.output

    def test_short_version_flag(self) -> None:
        result = runner.invoke(app, ["-v", "info"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_flag(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "render" in result.output
        assert "presets" in result.output


# ---------------------------------------------------------------------------
# info / presets
# ---------------------------------------------------------------------------


class TestInfoCommand:
    def test_info_runs_successfully(self) -> None:
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info_lists_dependencies(self) -> None:
        result = runner.invoke(app, ["info"])
        assert "pydantic" in result.output
        assert "typer" in result.output


class TestPresetsCommand:
    def test_lists_every_preset(self) -> None:
        result = runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        for name in ("plain", "vcard", "latex", "html"):
            assert name in result.output


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_render_plain_to_stdout(self, contacts_file: Path) -> None:
        result = runner.invoke(app, ["render", str(contacts_file)])
        assert result.exit_code == 0
        assert "Jane Doe" in result.output
        assert "jane@example.com" in result.output
        assert "employee: Jane Doe" in result.output

    def test_render_vcard(self, contacts_file: Path) -> None:
        result = runner.invoke(app, ["render", str(contacts_file), "--format", "vcard"])
        assert result.exit_code == 0
        assert result.output.count("BEGIN:VCARD") == 2

    def test_render_to_file(self, contacts_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out.html"
        result = runner.invoke(
            app, ["render", str(contacts_file), "-f", "html", "-o", str(output)]
        )
        assert result.exit_code == 0
        assert "Wrote 2 record(s)" in result.output
        text = output.read_bytes().decode("utf-8")
        assert text.startswith('<div class="rolodex">')

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_format(self, contacts_file: Path) -> None:
        result = runner.invoke(app, ["render", str(contacts_file), "--format", "rtf"])
        assert result.exit_code == 2
        assert "unknown format" in result.output

    def test_failures_are_reported(
        self, contacts_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _broken(self: PlainTextFormatter, record: object, entries: object) -> str:
            raise ValueError("broken body")

        monkeypatch.setattr(PlainTextFormatter, "format_record_body", _broken)
        result = runner.invoke(app, ["render", str(contacts_file)])
        assert result.exit_code == 0
        assert "Skipped" in result.output

    def test_strict_exits_non_zero_on_failure(
        self, contacts_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _broken(self: PlainTextFormatter, record: object, entries: object) -> str:
            raise ValueError("broken body")

        monkeypatch.setattr(PlainTextFormatter, "format_record_body", _broken)
        result = runner.invoke(app, ["render", str(contacts_file), "--strict"])
        assert result.exit_code == 1

    def test_strict_without_failures(self, contacts_file: Path) -> None:
        result = runner.invoke(app, ["render", str(contacts_file), "--strict"])
        assert result.exit_code == 0
