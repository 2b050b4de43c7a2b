"""Formatter configuration: the policy for one render pass."""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Any, Final, Literal, Self, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rolodex.exceptions import ConfigurationError

from .fields import FieldClass
from .records import RecordKind

WILDCARD: Final = "*"
"""Sort selector capturing every field no explicit selector names."""

SortSelector: TypeAlias = FieldClass | Literal["*"]

DEFAULT_EXCLUDE: frozenset[FieldClass] = frozenset(
    {FieldClass.UUID, FieldClass.TIMESTAMP, FieldClass.CREATION_DATE}
)

DEFAULT_SORT: tuple[SortSelector, ...] = (
    FieldClass.MAIL,
    FieldClass.PHONE,
    FieldClass.ADDRESS,
    WILDCARD,
    FieldClass.NOTES,
)


HeaderPolicy: TypeAlias = tuple[tuple[RecordKind, tuple[FieldClass, ...]], ...]

DEFAULT_HEADER: HeaderPolicy = (
    (RecordKind.PERSON, (FieldClass.ROLE, FieldClass.IMAGE)),
    (RecordKind.ORGANIZATION, (FieldClass.DOMAIN, FieldClass.IMAGE)),
)


# Public option names (as exposed to users) -> model field names.
_OPTION_NAMES: dict[str, str] = {
    "coding-system": "coding",
    "include": "include",
    "exclude": "exclude",
    "sort": "sort",
    "primary": "primary",
    "header": "header",
    "combine": "combine",
    "collapse": "collapse",
    "keep-unsorted": "keep_unsorted",
}


class FormatterConfig(BaseModel):
    """Declarative settings controlling which fields a render shows and how.

    Instances are frozen and validated on construction, so one config can be
    shared by any number of render passes.

    Attributes:
        coding: Output character encoding (any codec name Python knows).
        include: When non-empty, only these field classes are rendered and
            ``exclude`` is ignored.
        exclude: Field classes dropped when ``include`` is empty.
        sort: Ordered selectors; each is a field class or :data:`WILDCARD`.
        keep_unsorted: Whether fields matched by no selector are appended
            after the sorted groups (``True``) or dropped (``False``).  Only
            relevant when ``sort`` has no wildcard.
        primary: Keep only the primary-flagged mail instead of all mails.
        header: Field classes rendered in the record header, as
            (kind, classes) pairs.  A mapping of kind to classes is accepted
            on input.
        combine: Classes whose contiguous fields merge into one entry.
        collapse: Classes whose entries use the collapsed style.
    """

    coding: str = "utf-8"
    include: frozenset[FieldClass] = Field(default_factory=frozenset)
    exclude: frozenset[FieldClass] = DEFAULT_EXCLUDE
    sort: tuple[SortSelector, ...] = DEFAULT_SORT
    keep_unsorted: bool = False
    primary: bool = False
    header: HeaderPolicy = DEFAULT_HEADER
    combine: frozenset[FieldClass] = Field(default_factory=frozenset)
    collapse: frozenset[FieldClass] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)

    @field_validator("coding")
    @classmethod
    def _validate_coding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            msg = f"Unknown coding system: '{value}'"
            raise ValueError(msg) from e
        return value

    @field_validator("header", mode="before")
    @classmethod
    def _freeze_header(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @field_validator("sort")
    @classmethod
    def _validate_sort(cls, value: tuple[SortSelector, ...]) -> tuple[SortSelector, ...]:
        seen: set[FieldClass] = set()
        wildcards = 0
        for selector in value:
            if selector == WILDCARD:
                wildcards += 1
                continue
            if selector in seen:
                msg = f"Field class '{selector}' appears more than once in sort"
                raise ValueError(msg)
            seen.add(selector)
        if wildcards > 1:
            msg = "sort may contain at most one wildcard selector"
            raise ValueError(msg)
        return value

    # -- Derived views --

    @property
    def explicit_selectors(self) -> frozenset[FieldClass]:
        """Field classes named explicitly in ``sort``."""
        return frozenset(s for s in self.sort if s != WILDCARD)

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.sort

    def admits(self, field_class: FieldClass) -> bool:
        """Return ``True`` if fields of *field_class* pass the include/exclude policy."""
        if self.include:
            return field_class in self.include
        return field_class not in self.exclude

    def header_classes(self, kind: RecordKind) -> frozenset[FieldClass]:
        """Header field classes for a record kind, including its ancestor kinds."""
        classes: set[FieldClass] = set()
        lineage = set(kind.lineage)
        for header_kind, kind_classes in self.header:
            if header_kind in lineage:
                classes.update(kind_classes)
        return frozenset(classes)

    # -- Construction helpers --

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> Self:
        """Build a config from user-facing option names (``coding-system`` ...).

        Raises:
            ConfigurationError: On unknown option names or invalid values.
        """
        known = set(_OPTION_NAMES) | set(_OPTION_NAMES.values())
        unknown = sorted(set(options) - known)
        if unknown:
            msg = f"Unknown formatter option(s): {', '.join(unknown)}"
            raise ConfigurationError(msg)
        kwargs = {_OPTION_NAMES.get(key, key): value for key, value in options.items()}
        try:
            return cls(**kwargs)
        except ValidationError as e:
            msg = f"Invalid formatter options: {e}"
            raise ConfigurationError(msg) from e

    def with_options(self, **changes: Any) -> Self:
        """Return a validated copy with *changes* applied.

        Raises:
            ConfigurationError: If the resulting configuration is invalid.
        """
        data = {**self.model_dump(), **changes}
        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            msg = f"Invalid formatter options: {e}"
            raise ConfigurationError(msg) from e
