"""Record models: the contact records a render pass reads.

Records form a small closed hierarchy discriminated by ``kind``::

    generic -> entity -> person
                      -> organization

Each level adds field collections to the one above it.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .fields import (
    AddressField,
    CreationDateField,
    DomainField,
    ImageField,
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


class RecordKind(StrEnum):
    """The variant tag of a record."""

    GENERIC = "generic"
    ENTITY = "entity"
    PERSON = "person"
    ORGANIZATION = "organization"

    @property
    def lineage(self) -> tuple[RecordKind, ...]:
        """This kind followed by its ancestors, most specific first."""
        return _LINEAGE[self]


_LINEAGE: dict[RecordKind, tuple[RecordKind, ...]] = {
    RecordKind.GENERIC: (RecordKind.GENERIC,),
    RecordKind.ENTITY: (RecordKind.ENTITY, RecordKind.GENERIC),
    RecordKind.PERSON: (RecordKind.PERSON, RecordKind.ENTITY, RecordKind.GENERIC),
    RecordKind.ORGANIZATION: (
        RecordKind.ORGANIZATION,
        RecordKind.ENTITY,
        RecordKind.GENERIC,
    ),
}


def _new_uuid() -> UuidField:
    return UuidField(value=str(uuid.uuid4()))


class Record(BaseModel):
    """A generic record: identity, bookkeeping dates, notes, images and URLs."""

    kind: Literal["generic"] = "generic"
    uuid: UuidField = Field(default_factory=_new_uuid)
    name: str = ""
    creation_date: CreationDateField | None = None
    timestamp: TimestampField | None = None
    notes: tuple[NotesField, ...] = ()
    images: tuple[ImageField, ...] = ()
    urls: tuple[UrlField, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("uuid", mode="before")
    @classmethod
    def _coerce_uuid(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"value": value}
        return value

    @field_validator("creation_date", "timestamp", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        if isinstance(value, str | datetime):
            return {"value": value}
        return value

    @property
    def record_kind(self) -> RecordKind:
        return RecordKind(self.kind)

    @property
    def record_uuid(self) -> str:
        return self.uuid.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, uuid={self.record_uuid!r})"


class EntityRecord(Record):
    """A record that can be reached: mail, phone and postal addresses."""

    kind: Literal["entity"] = "entity"  # type: ignore[assignment]
    mail: tuple[MailField, ...] = ()
    phone: tuple[PhoneField, ...] = ()
    address: tuple[AddressField, ...] = ()

    @property
    def primary_mail(self) -> MailField | None:
        """The mail flagged as primary, or ``None`` when none is flagged."""
        for field in self.mail:
            if field.is_primary:
                return field
        return None


class PersonRecord(EntityRecord):
    kind: Literal["person"] = "person"  # type: ignore[assignment]
    aka: tuple[NameField, ...] = ()
    organizations: tuple[RoleField, ...] = ()
    relations: tuple[RelationField, ...] = ()


class OrganizationRecord(EntityRecord):
    """An organization.

    Its affiliation fields live on the affiliated records and are looked up
    through a contact store by this record's uuid.
    """

    kind: Literal["organization"] = "organization"  # type: ignore[assignment]
    domain: DomainField | None = None

    @field_validator("domain", mode="before")
    @classmethod
    def _coerce_domain(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"domain": value}
        return value


AnyRecord: TypeAlias = Annotated[
    Record | EntityRecord | PersonRecord | OrganizationRecord,
    Field(discriminator="kind"),
]

_RECORDS_ADAPTER: TypeAdapter[list[AnyRecord]] = TypeAdapter(list[AnyRecord])


def load_records(data: Sequence[dict[str, Any]]) -> list[Record]:
    """Validate JSON-compatible mappings into the matching record variants.

    Raises:
        pydantic.ValidationError: When any mapping is malformed or carries
            an unknown ``kind``.
    """
    return list(_RECORDS_ADAPTER.validate_python(list(data)))
