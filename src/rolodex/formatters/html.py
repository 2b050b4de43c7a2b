"""HTML formatter."""

from __future__ import annotations

import html
from collections.abc import Sequence

from rolodex.models.entry import FieldEntry, Style
from rolodex.models.records import Record

from .record import RecordFormatter
from .utils import escape_html


class HtmlFormatter(RecordFormatter):
    """Formats records as an HTML fragment.

    The batch is wrapped in ``<div class="rolodex">``; each record is a
    ``<div class="record">`` with an ``<h2>`` name, one paragraph per
    header entry, and a ``<table>`` of body entries.  Entries with the
    ``collapse`` style render as ``<details>``: the first line of the value
    is always visible and the full value shows when expanded.
    """

    @property
    def format_type(self) -> str:
        return "html"

    def format_header(self, records: Sequence[Record]) -> str:
        return '<div class="rolodex">\n'

    def format_footer(self, records: Sequence[Record]) -> str:
        return "</div>\n"

    def format_record_header(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        lines = [
            f'<div class="record record-{record.kind}" id="{html.escape(record.record_uuid)}">',
            f"<h2>{html.escape(record.name or record.record_uuid)}</h2>",
        ]
        for entry in entries:
            _, value = self.compose(entry, record)
            lines.append(f'<p class="{entry.field_class.value}">{escape_html(value)}</p>')
        return "\n".join(lines) + "\n"

    def format_record_body(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        lines: list[str] = []
        if entries:
            lines.append('<table class="fields">')
            for entry in entries:
                label, value = self.compose(entry, record)
                if entry.style == Style.COLLAPSE:
                    full = self.render_value(entry.instances[0], None, record)
                    cell = (
                        f"<details><summary>{escape_html(value)}</summary>"
                        f"{escape_html(full)}</details>"
                    )
                else:
                    cell = escape_html(value)
                lines.append(
                    f'<tr class="{entry.field_class.value}">'
                    f"<th>{html.escape(label)}</th><td>{cell}</td></tr>"
                )
            lines.append("</table>")
        lines.append("</div>")
        return "\n".join(lines) + "\n"
