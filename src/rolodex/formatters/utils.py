"""Text helpers shared across formatter implementations.

These are *not* part of the public API and should not be imported
outside this package.
"""

from __future__ import annotations

import html

VCARD_LINE_OCTETS = 75
"""Maximum vCard content line length before folding (RFC 6350, 3.2)."""

_LATEX_SPECIALS: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def first_line(text: str) -> str:
    """Return the first line of *text*, without its line break."""
    lines = text.splitlines()
    return lines[0] if lines else ""


def indent_lines(text: str, prefix: str) -> list[str]:
    """Split *text* into lines and prefix each one."""
    return [prefix + line for line in text.splitlines()] or [prefix]


def escape_vcard(text: str) -> str:
    """Escape a vCard property value (backslash, comma, semicolon, newline)."""
    return (
        text.replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def vcard_param(value: str) -> str:
    """Quote a vCard parameter value when it contains separator characters."""
    value = value.replace('"', "'")
    if any(ch in value for ch in ",;:"):
        return f'"{value}"'
    return value


def fold_vcard_line(line: str, limit: int = VCARD_LINE_OCTETS) -> str:
    """Fold a content line into CRLF-terminated chunks of at most *limit* octets.

    Continuation lines start with a single space, which counts towards the
    limit.  Multi-byte UTF-8 characters are never split.
    """
    chunks: list[str] = []
    current: list[str] = []
    size = 0
    budget = limit
    for ch in line:
        width = len(ch.encode("utf-8"))
        if size + width > budget and current:
            chunks.append("".join(current))
            current, size, budget = [], 0, limit - 1
        current.append(ch)
        size += width
    chunks.append("".join(current))
    return "\r\n ".join(chunks) + "\r\n"


def escape_latex(text: str) -> str:
    """Escape LaTeX special characters; line breaks become ``\\newline``."""
    escaped = "".join(_LATEX_SPECIALS.get(ch, ch) for ch in text)
    return " \\newline ".join(escaped.splitlines())


def escape_html(text: str) -> str:
    """HTML-escape *text*; line breaks become ``<br>``."""
    return "<br>".join(html.escape(line) for line in text.splitlines())
