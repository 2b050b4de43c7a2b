"""End-to-end rendering: JSON contact file -> store -> registry -> text."""

from __future__ import annotations

import json
from pathlib import Path

from rolodex import (
    FieldClass,
    FormatterConfig,
    JsonFileContactStore,
    PlainTextFormatter,
    default_registry,
)
from tests.conftest import ORG_UUID, PERSON_UUID

CONTACTS = [
    {
        "kind": "person",
        "uuid": PERSON_UUID,
        "name": "Jane Doe",
        "timestamp": "2024-06-07T08:09:10Z",
        "mail": [
            {"address": "jane@example.com", "priority": "primary"},
            {"address": "jd@old.example", "priority": "defunct"},
        ],
        "phone": [{"label": "work", "number": "+1 555 0100"}],
        "address": [
            {"label": "home", "streets": ["1 Main St"], "locality": "Springfield"},
        ],
        "organizations": [
            {
                "label": "employee",
                "organization_uuid": ORG_UUID,
                "organization_name": "Acme Corp",
                "record_uuid": PERSON_UUID,
                "record_name": "Jane Doe",
                "title": "CTO",
            }
        ],
        "notes": [{"text": "Met at PyCon.\nLikes tea."}],
    },
    {
        "kind": "organization",
        "uuid": ORG_UUID,
        "name": "Acme Corp",
        "domain": "acme.example",
        "phone": [{"label": "main", "number": "+1 555 0199"}],
    },
]


def _store(tmp_path: Path) -> JsonFileContactStore:
    path = tmp_path / "contacts.json"
    path.write_text(json.dumps(CONTACTS), encoding="utf-8")
    return JsonFileContactStore(path)


class TestGoldenPath:
    def test_plain_export(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        result = default_registry(store=store).resolve("plain").format(store.get_all())
        assert result.ok
        assert result.text == (
            "Jane Doe\n"
            "  CTO, Acme Corp\n"
            " Mail: jane@example.com\n"
            " Mail: jd@old.example\n"
            " work: +1 555 0100\n"
            " home: 1 Main St\n"
            "Notes: Met at PyCon.\n"
            "\n"
            "Acme Corp\n"
            "  acme.example\n"
            "    main: +1 555 0199\n"
            "employee: Jane Doe (CTO)\n"
        )

    def test_oneline_export(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        result = default_registry(store=store).resolve("plain-oneline").format(store.get_all())
        assert "jd@old.example" not in result.text
        assert "Notes" not in result.text

    def test_every_target_renders_every_record(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        registry = default_registry(store=store)
        for name in registry:
            result = registry.resolve(name).format(store.get_all())
            assert result.ok, name
            assert result.rendered_count == 2, name
            assert "Acme Corp" in result.text, name

    def test_vcard_keeps_revision(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        result = default_registry(store=store).resolve("vcard").format(store.get_all())
        assert "REV:20240607T080910Z\r\n" in result.text
        assert "X-AFFILIATION;TYPE=employee:Jane Doe\r\n" in result.text

    def test_options_surface(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        config = FormatterConfig.from_options(
            {
                "include": ["mail", "notes"],
                "sort": ["notes", "mail"],
                "combine": ["mail"],
                "coding-system": "latin-1",
            }
        )
        formatter = PlainTextFormatter(config, store=store)
        person = store.get(PERSON_UUID)
        assert person is not None
        result = formatter.format([person])
        assert result.text == (
            "Jane Doe\n"
            "Notes: Met at PyCon.\n"
            " Mail: jane@example.com, jd@old.example\n"
        )
        assert result.encode() == result.text.encode("latin-1")
        assert FieldClass.MAIL in config.combine
