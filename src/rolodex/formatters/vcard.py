"""vCard 4.0 formatter (RFC 6350)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, ClassVar

from rolodex.models.entry import FieldEntry, Style
from rolodex.models.fields import (
    AddressField,
    ContactField,
    CreationDateField,
    FieldClass,
    ImageField,
    LabeledField,
    MailField,
    NameField,
    NotesField,
    PhoneField,
    RelationField,
    RoleField,
    TimestampField,
    UrlField,
    UuidField,
)
from rolodex.models.records import Record, RecordKind

from .dispatch import RenderRule, label_rule, value_rule
from .record import RecordFormatter
from .utils import escape_vcard, fold_vcard_line, vcard_param

_PROPERTIES: dict[type, str] = {
    MailField: "EMAIL",
    PhoneField: "TEL",
    AddressField: "ADR",
    NameField: "NICKNAME",
    RoleField: "ORG",
    RelationField: "RELATED",
    UrlField: "URL",
    ImageField: "PHOTO",
    NotesField: "NOTE",
    UuidField: "UID",
    TimestampField: "REV",
}


def _vcard_datetime(value: datetime) -> str:
    if value.tzinfo is not None:
        return value.astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")
    return value.strftime("%Y%m%dT%H%M%S")


def _property_name(field: ContactField) -> str:
    return _PROPERTIES.get(type(field), "X-" + field.field_class.value.upper())


def _typed(name: str, field: LabeledField) -> str:
    return f"{name};TYPE={vcard_param(field.label)}" if field.label else name


@label_rule(field=FieldClass)
def _class_property(fmt: Any, subject: FieldClass, style: Style | None, record: Record) -> str:
    return "X-" + subject.value.upper()


@label_rule()
def _property(fmt: Any, subject: ContactField, style: Style | None, record: Record) -> str:
    return _property_name(subject)


@label_rule(field=LabeledField)
def _typed_property(fmt: Any, subject: LabeledField, style: Style | None, record: Record) -> str:
    return _typed(_property_name(subject), subject)


@label_rule(field=MailField)
def _mail_property(fmt: Any, subject: MailField, style: Style | None, record: Record) -> str:
    return "EMAIL;PREF=1" if subject.is_primary else "EMAIL"


@label_rule(field=RoleField, record=RecordKind.ORGANIZATION)
def _affiliate_property(fmt: Any, subject: RoleField, style: Style | None, record: Record) -> str:
    return _typed("X-AFFILIATION", subject)


@value_rule()
def _text_value(fmt: Any, field: ContactField, style: Style | None, record: Record) -> str:
    return escape_vcard(field.string())


@value_rule(field=MailField)
def _mail_value(fmt: Any, field: MailField, style: Style | None, record: Record) -> str:
    return escape_vcard(field.address)


@value_rule(field=AddressField)
def _address_value(fmt: Any, field: AddressField, style: Style | None, record: Record) -> str:
    street = ",".join(escape_vcard(s) for s in field.streets if s)
    parts = [
        "",
        "",
        street,
        escape_vcard(field.locality),
        escape_vcard(field.region),
        escape_vcard(field.postcode),
        escape_vcard(field.country),
    ]
    return ";".join(parts)


@value_rule(field=RoleField)
def _org_value(fmt: Any, field: RoleField, style: Style | None, record: Record) -> str:
    return escape_vcard(field.organization_name)


@value_rule(field=RoleField, record=RecordKind.ORGANIZATION)
def _affiliate_value(fmt: Any, field: RoleField, style: Style | None, record: Record) -> str:
    return escape_vcard(field.record_name)


@value_rule(field=RelationField)
def _related_value(fmt: Any, field: RelationField, style: Style | None, record: Record) -> str:
    return f"urn:uuid:{field.target_uuid}"


@value_rule(field=UuidField)
def _uid_value(fmt: Any, field: UuidField, style: Style | None, record: Record) -> str:
    return f"urn:uuid:{field.value}"


@value_rule(field=TimestampField)
def _rev_value(fmt: Any, field: TimestampField, style: Style | None, record: Record) -> str:
    return _vcard_datetime(field.value)


@value_rule(field=CreationDateField)
def _created_value(
    fmt: Any, field: CreationDateField, style: Style | None, record: Record
) -> str:
    return _vcard_datetime(field.value)


class VCardFormatter(RecordFormatter):
    """Formats records as vCard 4.0 cards.

    Every field instance becomes one content line, so combined entries are
    unrolled; styles do not apply to vCard properties.  Lines end in CRLF
    and are folded at 75 octets.  Organizations get ``KIND:org`` and list
    their affiliates as ``X-AFFILIATION`` properties.  A role held by a person
    yields an ``ORG`` line followed by a ``TITLE`` line when it has a title.
    """

    render_rules: ClassVar[tuple[RenderRule, ...]] = (
        _class_property,
        _property,
        _typed_property,
        _mail_property,
        _affiliate_property,
        _text_value,
        _mail_value,
        _address_value,
        _org_value,
        _affiliate_value,
        _related_value,
        _uid_value,
        _rev_value,
        _created_value,
    )

    @property
    def format_type(self) -> str:
        return "vcard"

    def _content_lines(self, record: Record, entries: Sequence[FieldEntry]) -> list[str]:
        lines: list[str] = []
        for entry in entries:
            for field in entry.instances:
                name = self.render_label(field, None, record)
                value = self.render_value(field, None, record)
                lines.append(fold_vcard_line(f"{name}:{value}"))
                if (
                    isinstance(field, RoleField)
                    and field.title
                    and record.record_kind != RecordKind.ORGANIZATION
                ):
                    lines.append(fold_vcard_line(f"TITLE:{escape_vcard(field.title)}"))
        return lines

    def format_record_header(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        lines = [
            "BEGIN:VCARD\r\n",
            "VERSION:4.0\r\n",
        ]
        if record.record_kind == RecordKind.ORGANIZATION:
            lines.append("KIND:org\r\n")
        lines.append(fold_vcard_line(f"FN:{escape_vcard(record.name)}"))
        lines.extend(self._content_lines(record, entries))
        return "".join(lines)

    def format_record_body(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        return "".join(self._content_lines(record, entries)) + "END:VCARD\r\n"
