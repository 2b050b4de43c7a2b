"""Formatter protocol definition.

Any object with ``format_type`` and the methods below can be registered as
an output target -- no inheritance required (PEP 544 structural subtyping).
:class:`~rolodex.formatters.record.RecordFormatter` is the canonical base
for targets that want the collect/sort/process pipeline and the default
render rules.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from rolodex.models.entry import FieldEntry, Style
from rolodex.models.fields import ContactField, FieldClass
from rolodex.models.records import Record
from rolodex.models.result import RenderResult


@runtime_checkable
class Formatter(Protocol):
    """Protocol for record output targets (plain text, vCard, LaTeX, HTML ...)."""

    @property
    def format_type(self) -> str:
        """Identifier for this output target (e.g. 'plain', 'vcard')."""
        ...

    def format(self, records: Sequence[Record]) -> RenderResult:
        """Render a batch of records, wrapped in the batch header and footer."""
        ...

    def format_record(self, record: Record) -> str:
        """Render a single record."""
        ...

    def format_record_header(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        """Render the header section of a record from its header entries."""
        ...

    def format_record_body(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        """Render the body section of a record from its remaining entries."""
        ...

    def render_label(
        self, subject: ContactField | FieldClass, style: Style | None, record: Record
    ) -> str:
        """Render the label of a field, or of a whole field class."""
        ...

    def render_value(self, field: ContactField, style: Style | None, record: Record) -> str:
        """Render the value of a field."""
        ...
