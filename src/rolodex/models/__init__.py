"""Core data models for rolodex."""

from .config import DEFAULT_EXCLUDE, DEFAULT_SORT, WILDCARD, FormatterConfig, SortSelector
from .entry import FieldEntry, Style
from .fields import (
    AddressField,
    ContactField,
    CreationDateField,
    DomainField,
    FieldClass,
    ImageField,
    LabeledField,
    MailField,
    MailPriority,
    NameField,
    NotesField,
    PhoneField,
    RelationField,
    RoleField,
    TimestampField,
    UrlField,
    UuidField,
)
from .records import (
    AnyRecord,
    EntityRecord,
    OrganizationRecord,
    PersonRecord,
    Record,
    RecordKind,
    load_records,
)
from .result import RenderFailure, RenderResult

__all__ = [
    "DEFAULT_EXCLUDE",
    "DEFAULT_SORT",
    "WILDCARD",
    "AddressField",
    "AnyRecord",
    "ContactField",
    "CreationDateField",
    "DomainField",
    "EntityRecord",
    "FieldClass",
    "FieldEntry",
    "FormatterConfig",
    "ImageField",
    "LabeledField",
    "MailField",
    "MailPriority",
    "NameField",
    "NotesField",
    "OrganizationRecord",
    "PersonRecord",
    "PhoneField",
    "Record",
    "RecordKind",
    "RelationField",
    "RenderFailure",
    "RenderResult",
    "RoleField",
    "SortSelector",
    "Style",
    "TimestampField",
    "UrlField",
    "UuidField",
    "load_records",
]
