"""Field entries: the renderable groups the processor hands to formatters."""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator

from .fields import ContactField, FieldClass


class Style(StrEnum):
    """How a field entry should be rendered."""

    ONELINE = "oneline"
    COMPACT = "compact"
    COLLAPSE = "collapse"


class FieldEntry(BaseModel):
    """One renderable group of same-class fields.

    Most entries hold a single field.  Entries for combined classes hold
    the whole contiguous run of fields of that class.
    """

    field_class: FieldClass
    style: Style
    instances: tuple[ContactField, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_instances(self) -> Self:
        if not self.instances:
            msg = "FieldEntry requires at least one field instance"
            raise ValueError(msg)
        for instance in self.instances:
            if instance.field_class != self.field_class:
                msg = (
                    f"FieldEntry of class '{self.field_class}' cannot hold a "
                    f"'{instance.field_class}' field"
                )
                raise ValueError(msg)
        return self

    @property
    def is_combined(self) -> bool:
        return len(self.instances) > 1
