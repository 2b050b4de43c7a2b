"""LaTeX formatter."""

from __future__ import annotations

from collections.abc import Sequence

from rolodex.models.entry import FieldEntry
from rolodex.models.records import Record

from .record import RecordFormatter
from .utils import escape_latex


class LatexFormatter(RecordFormatter):
    """Formats records as a LaTeX ``description`` list.

    Each record is an ``\\item`` labelled with the record name, followed by
    its header values in italics and one ``\\textbf{label}: value`` row per
    body entry.  Labels and values are escaped; multi-line values are
    joined with ``\\newline``.  An empty batch renders as empty text, since
    an empty ``description`` environment does not compile.
    """

    @property
    def format_type(self) -> str:
        return "latex"

    def format_header(self, records: Sequence[Record]) -> str:
        return "\\begin{description}\n" if records else ""

    def format_footer(self, records: Sequence[Record]) -> str:
        return "\\end{description}\n" if records else ""

    def format_record_header(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        line = f"\\item[{{{escape_latex(record.name or record.record_uuid)}}}]"
        values = [escape_latex(self.compose(entry, record)[1]) for entry in entries]
        if values:
            line += " " + "; ".join(f"\\textit{{{value}}}" for value in values)
        return line + "\n"

    def format_record_body(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        rows: list[str] = []
        for entry in entries:
            label, value = self.compose(entry, record)
            rows.append(f"  \\textbf{{{escape_latex(label)}}}: {escape_latex(value)}\\\\\n")
        return "".join(rows)
