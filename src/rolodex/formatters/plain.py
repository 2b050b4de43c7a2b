"""Plain text formatter."""

from __future__ import annotations

from collections.abc import Sequence

from rolodex.models.entry import FieldEntry
from rolodex.models.records import Record

from .record import RecordFormatter
from .utils import indent_lines


class PlainTextFormatter(RecordFormatter):
    """Formats records as aligned ``label: value`` text for display.

    Example output::

        Jane Doe
          CTO, Acme
           Mail: jane@example.com
           work: +1 555 0100
        Address: 1 Main St
                 Springfield

    The record name comes first, then one indented line per header entry,
    then the body with labels right-aligned.  Continuation lines of
    multi-line values are indented under the value column.  Records are
    separated by a blank line.
    """

    record_separator = "\n"

    @property
    def format_type(self) -> str:
        return "plain"

    def format_record_header(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        lines = [record.name or record.record_uuid]
        for entry in entries:
            _, value = self.compose(entry, record)
            lines.extend(indent_lines(value, "  "))
        return "\n".join(lines) + "\n"

    def format_record_body(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        rows = [self.compose(entry, record) for entry in entries]
        if not rows:
            return ""
        width = max(len(label) for label, _ in rows)
        lines: list[str] = []
        for label, value in rows:
            head, *rest = value.splitlines() or [""]
            lines.append(f"{label:>{width}}: {head}")
            lines.extend(" " * (width + 2) + line for line in rest)
        return "\n".join(lines) + "\n"
