"""rolodex: render contact records as text, vCard, LaTeX or HTML.

Field Pipeline:
    collect, sort_fields, process_fields, RenderCallback

Formatting:
    RecordFormatter, PlainTextFormatter, VCardFormatter, LatexFormatter,
    HtmlFormatter, FormatterRegistry, default_registry, RenderRule,
    label_rule, value_rule, resolve_rule

Presets:
    default_plain_config, oneline_plain_config, vcard_config, latex_config,
    html_config

Protocols (extension points):
    Formatter, ContactStore

Storage:
    InMemoryContactStore, JsonFileContactStore

Models & Types:
    FormatterConfig, FieldEntry, Style, FieldClass, WILDCARD,
    Record, EntityRecord, PersonRecord, OrganizationRecord, RecordKind,
    ContactField, LabeledField, MailField, PhoneField, AddressField,
    NameField, RoleField, RelationField, DomainField, NotesField, UrlField,
    ImageField, UuidField, CreationDateField, TimestampField,
    RenderResult, RenderFailure, load_records

Exceptions:
    RolodexError, ConfigurationError, DispatchError, RecordRenderError,
    StorageError
"""

from importlib.metadata import PackageNotFoundError, version

from rolodex.exceptions import (
    ConfigurationError,
    DispatchError,
    RecordRenderError,
    RolodexError,
    StorageError,
)
from rolodex.formatters import (
    Formatter,
    FormatterRegistry,
    HtmlFormatter,
    LatexFormatter,
    PlainTextFormatter,
    RecordFormatter,
    RenderRule,
    VCardFormatter,
    default_plain_config,
    default_registry,
    html_config,
    label_rule,
    latex_config,
    oneline_plain_config,
    resolve_rule,
    value_rule,
    vcard_config,
)
from rolodex.models import (
    WILDCARD,
    AddressField,
    ContactField,
    CreationDateField,
    DomainField,
    EntityRecord,
    FieldClass,
    FieldEntry,
    FormatterConfig,
    ImageField,
    LabeledField,
    MailField,
    NameField,
    NotesField,
    OrganizationRecord,
    PersonRecord,
    PhoneField,
    Record,
    RecordKind,
    RelationField,
    RenderFailure,
    RenderResult,
    RoleField,
    Style,
    TimestampField,
    UrlField,
    UuidField,
    load_records,
)
from rolodex.pipeline import RenderCallback, collect, process_fields, sort_fields
from rolodex.protocols import ContactStore
from rolodex.storage import InMemoryContactStore, JsonFileContactStore

try:
    __version__ = version("rolodex")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "WILDCARD",
    "AddressField",
    "ConfigurationError",
    "ContactField",
    "ContactStore",
    "CreationDateField",
    "DispatchError",
    "DomainField",
    "EntityRecord",
    "FieldClass",
    "FieldEntry",
    "Formatter",
    "FormatterConfig",
    "FormatterRegistry",
    "HtmlFormatter",
    "ImageField",
    "InMemoryContactStore",
    "JsonFileContactStore",
    "LabeledField",
    "LatexFormatter",
    "MailField",
    "NameField",
    "NotesField",
    "OrganizationRecord",
    "PersonRecord",
    "PhoneField",
    "PlainTextFormatter",
    "Record",
    "RecordFormatter",
    "RecordKind",
    "RecordRenderError",
    "RelationField",
    "RenderCallback",
    "RenderFailure",
    "RenderResult",
    "RenderRule",
    "RoleField",
    "RolodexError",
    "StorageError",
    "Style",
    "TimestampField",
    "UrlField",
    "UuidField",
    "VCardFormatter",
    "__version__",
    "collect",
    "default_plain_config",
    "default_registry",
    "html_config",
    "label_rule",
    "latex_config",
    "load_records",
    "oneline_plain_config",
    "process_fields",
    "resolve_rule",
    "sort_fields",
    "value_rule",
    "vcard_config",
]
