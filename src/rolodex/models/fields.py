"""Field models: the typed values a contact record carries.

Every field knows its :class:`FieldClass` and can produce a canonical
string with :meth:`ContactField.string`.  Fields deriving from
:class:`LabeledField` also carry a free-form ``label`` (``"work"``,
``"home"``, ``"employee"`` ...).
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import ClassVar, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict

MailPriority: TypeAlias = Literal["primary", "normal", "defunct"]


class FieldClass(StrEnum):
    """The semantic kind of a field."""

    MAIL = "mail"
    PHONE = "phone"
    ADDRESS = "address"
    NAME = "name"
    ROLE = "role"
    RELATION = "relation"
    DOMAIN = "domain"
    NOTES = "notes"
    URL = "url"
    IMAGE = "image"
    UUID = "uuid"
    CREATION_DATE = "creation-date"
    TIMESTAMP = "timestamp"

    @property
    def display_name(self) -> str:
        """Human-readable name used as a label for the whole class."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[FieldClass, str] = {
    FieldClass.MAIL: "Mail",
    FieldClass.PHONE: "Phone",
    FieldClass.ADDRESS: "Address",
    FieldClass.NAME: "Name",
    FieldClass.ROLE: "Role",
    FieldClass.RELATION: "Relation",
    FieldClass.DOMAIN: "Domain",
    FieldClass.NOTES: "Notes",
    FieldClass.URL: "URL",
    FieldClass.IMAGE: "Image",
    FieldClass.UUID: "UUID",
    FieldClass.CREATION_DATE: "Creation Date",
    FieldClass.TIMESTAMP: "Timestamp",
}


class ContactField(BaseModel):
    """Base class for every field variant.

    Fields are immutable; the render pipeline only ever reads them.
    """

    field_class: ClassVar[FieldClass]

    model_config = ConfigDict(frozen=True)

    def string(self) -> str:
        """Return the full (possibly multi-line) string representation."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.string()


class LabeledField(ContactField):
    """A field carrying a free-form label next to its value."""

    label: str = ""


class MailField(ContactField):
    field_class: ClassVar[FieldClass] = FieldClass.MAIL

    address: str
    name: str | None = None
    priority: MailPriority = "normal"

    @property
    def is_primary(self) -> bool:
        return self.priority == "primary"

    def string(self) -> str:
        if self.name:
            return f"{self.name} <{self.address}>"
        return self.address


class PhoneField(LabeledField):
    field_class: ClassVar[FieldClass] = FieldClass.PHONE

    number: str
    extension: int | None = None

    def string(self) -> str:
        if self.extension is not None:
            return f"{self.number} ext. {self.extension}"
        return self.number


class AddressField(LabeledField):
    """A postal address, rendered one component group per line."""

    field_class: ClassVar[FieldClass] = FieldClass.ADDRESS

    streets: tuple[str, ...] = ()
    locality: str = ""
    region: str = ""
    postcode: str = ""
    country: str = ""

    def string(self) -> str:
        lines = [street for street in self.streets if street]
        tail = " ".join(part for part in (self.region, self.postcode) if part)
        city_line = ", ".join(part for part in (self.locality, tail) if part)
        if city_line:
            lines.append(city_line)
        if self.country:
            lines.append(self.country)
        return "\n".join(lines)


class NameField(ContactField):
    """An alternate name (nickname, maiden name, ...)."""

    field_class: ClassVar[FieldClass] = FieldClass.NAME

    name: str

    def string(self) -> str:
        return self.name


class RoleField(LabeledField):
    """An affiliation between a person and an organization.

    The same field is visible from both sides: from the person it reads as
    the organization, from the organization it reads as the person.
    """

    field_class: ClassVar[FieldClass] = FieldClass.ROLE

    organization_uuid: str
    organization_name: str
    record_uuid: str
    record_name: str
    title: str | None = None

    def string(self) -> str:
        if self.title:
            return f"{self.title}, {self.organization_name}"
        return self.organization_name


class RelationField(LabeledField):
    field_class: ClassVar[FieldClass] = FieldClass.RELATION

    target_uuid: str
    target_name: str

    def string(self) -> str:
        return self.target_name


class DomainField(ContactField):
    field_class: ClassVar[FieldClass] = FieldClass.DOMAIN

    domain: str

    def string(self) -> str:
        return self.domain


class NotesField(ContactField):
    field_class: ClassVar[FieldClass] = FieldClass.NOTES

    text: str

    def string(self) -> str:
        return self.text


class UrlField(LabeledField):
    field_class: ClassVar[FieldClass] = FieldClass.URL

    url: str

    def string(self) -> str:
        return self.url


class ImageField(ContactField):
    field_class: ClassVar[FieldClass] = FieldClass.IMAGE

    path: str

    def string(self) -> str:
        return self.path


class UuidField(ContactField):
    field_class: ClassVar[FieldClass] = FieldClass.UUID

    value: str

    def string(self) -> str:
        return self.value


class CreationDateField(ContactField):
    field_class: ClassVar[FieldClass] = FieldClass.CREATION_DATE

    value: datetime

    def string(self) -> str:
        return self.value.isoformat()


class TimestampField(ContactField):
    """Time of the record's last modification."""

    field_class: ClassVar[FieldClass] = FieldClass.TIMESTAMP

    value: datetime

    def string(self) -> str:
        return self.value.isoformat()
