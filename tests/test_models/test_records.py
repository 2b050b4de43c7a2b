"""Tests for rolodex.models.records, entry and result."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rolodex.models.entry import FieldEntry, Style
from rolodex.models.fields import FieldClass, MailField
from rolodex.models.records import (
    EntityRecord,
    OrganizationRecord,
    PersonRecord,
    Record,
    RecordKind,
    load_records,
)
from rolodex.models.result import RenderFailure, RenderResult
from tests.conftest import ORG_UUID, PERSON_UUID, make_mail, make_person, make_phone


class TestRecordKind:
    def test_lineage(self) -> None:
        assert RecordKind.PERSON.lineage == (
            RecordKind.PERSON,
            RecordKind.ENTITY,
            RecordKind.GENERIC,
        )
        assert RecordKind.ORGANIZATION.lineage[1:] == (RecordKind.ENTITY, RecordKind.GENERIC)
        assert RecordKind.GENERIC.lineage == (RecordKind.GENERIC,)


class TestRecords:
    def test_generic_record_gets_a_uuid(self) -> None:
        first, second = Record(), Record()
        assert first.record_uuid
        assert first.record_uuid != second.record_uuid

    def test_string_uuid_is_coerced(self) -> None:
        record = Record(uuid=PERSON_UUID)  # type: ignore[arg-type]
        assert record.record_uuid == PERSON_UUID
        assert record.uuid.field_class is FieldClass.UUID

    def test_string_dates_are_coerced(self) -> None:
        record = Record(creation_date="2024-01-02T03:04:05Z")  # type: ignore[arg-type]
        assert record.creation_date is not None
        assert record.creation_date.value.year == 2024

    def test_record_kind(self) -> None:
        assert make_person().record_kind is RecordKind.PERSON
        assert EntityRecord().record_kind is RecordKind.ENTITY

    def test_domain_string_is_coerced(self) -> None:
        org = OrganizationRecord(domain="acme.example")  # type: ignore[arg-type]
        assert org.domain is not None
        assert org.domain.string() == "acme.example"

    def test_primary_mail(self) -> None:
        person = make_person(
            mail=(make_mail("q@x.com"), make_mail("p@x.com", primary=True)),
        )
        assert person.primary_mail is not None
        assert person.primary_mail.address == "p@x.com"

    def test_primary_mail_absent(self) -> None:
        person = make_person(mail=(make_mail("q@x.com"),))
        assert person.primary_mail is None

    def test_records_are_frozen(self) -> None:
        person = make_person()
        with pytest.raises(ValidationError):
            person.name = "Other"  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(make_person()) == f"PersonRecord(name='Jane Doe', uuid='{PERSON_UUID}')"


class TestLoadRecords:
    def test_dispatches_on_kind(self) -> None:
        records = load_records(
            [
                {"kind": "person", "uuid": PERSON_UUID, "name": "Jane"},
                {"kind": "organization", "uuid": ORG_UUID, "name": "Acme"},
                {"kind": "entity", "name": "Front desk"},
                {"kind": "generic", "name": "Misc"},
            ]
        )
        assert [type(r) for r in records] == [
            PersonRecord,
            OrganizationRecord,
            EntityRecord,
            Record,
        ]

    def test_nested_fields(self) -> None:
        (person,) = load_records(
            [
                {
                    "kind": "person",
                    "name": "Jane",
                    "mail": [{"address": "a@example.com", "priority": "primary"}],
                    "phone": [{"label": "work", "number": "+1 555 0100"}],
                }
            ]
        )
        assert isinstance(person, PersonRecord)
        assert person.mail[0] == MailField(address="a@example.com", priority="primary")
        assert person.phone[0] == make_phone("work", "+1 555 0100")

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValidationError):
            load_records([{"kind": "robot"}])


class TestFieldEntry:
    def test_requires_instances(self) -> None:
        with pytest.raises(ValidationError, match="at least one"):
            FieldEntry(field_class=FieldClass.MAIL, style=Style.ONELINE, instances=())

    def test_rejects_mixed_classes(self) -> None:
        with pytest.raises(ValidationError, match="cannot hold"):
            FieldEntry(
                field_class=FieldClass.MAIL,
                style=Style.COMPACT,
                instances=(make_mail("a@example.com"), make_phone("work", "1")),
            )

    def test_is_combined(self) -> None:
        single = FieldEntry(
            field_class=FieldClass.MAIL,
            style=Style.COMPACT,
            instances=(make_mail("a@example.com"),),
        )
        double = FieldEntry(
            field_class=FieldClass.MAIL,
            style=Style.COMPACT,
            instances=(make_mail("a@example.com"), make_mail("b@example.com")),
        )
        assert not single.is_combined
        assert double.is_combined

    def test_keeps_field_variant(self) -> None:
        mail = make_mail("a@example.com")
        entry = FieldEntry(field_class=FieldClass.MAIL, style=Style.ONELINE, instances=(mail,))
        assert isinstance(entry.instances[0], MailField)


class TestRenderResult:
    def test_ok(self) -> None:
        assert RenderResult().ok
        failure = RenderFailure(record_uuid="x", error_type="ValueError", message="boom")
        assert not RenderResult(failures=[failure]).ok

    def test_encode_uses_coding(self) -> None:
        result = RenderResult(text="Zoë", coding="latin-1")
        assert result.encode() == "Zoë".encode("latin-1")

    def test_encode_errors(self) -> None:
        result = RenderResult(text="Zoë", coding="ascii")
        with pytest.raises(UnicodeEncodeError):
            result.encode()
        assert result.encode(errors="replace") == b"Zo?"
