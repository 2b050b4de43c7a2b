"""Example: Presets and a custom output target. Run with: python examples/custom_formatter.py

Demonstrates how to render the same records through the built-in presets
of ``default_registry`` and how to add a new output target: a Markdown
formatter that overrides the value rule for mail fields and implements
the record header/body hooks.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from rolodex import (
    FieldClass,
    FieldEntry,
    FormatterConfig,
    InMemoryContactStore,
    MailField,
    OrganizationRecord,
    PersonRecord,
    PhoneField,
    Record,
    RecordFormatter,
    RenderRule,
    RoleField,
    Style,
    default_registry,
    value_rule,
)

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

ACME = "16fd2706-8baf-433b-82eb-8c7fada847da"
JANE = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


def build_store() -> InMemoryContactStore:
    """Create a store with one person and the organization they work for."""
    jane = PersonRecord(
        uuid=JANE,  # type: ignore[arg-type]
        name="Jane Doe",
        mail=(
            MailField(address="jane@example.com", priority="primary"),
            MailField(address="jd@work.example"),
        ),
        phone=(PhoneField(label="work", number="+1 555 0100"),),
        organizations=(
            RoleField(
                label="employee",
                organization_uuid=ACME,
                organization_name="Acme Corp",
                record_uuid=JANE,
                record_name="Jane Doe",
                title="CTO",
            ),
        ),
    )
    acme = OrganizationRecord(
        uuid=ACME,  # type: ignore[arg-type]
        name="Acme Corp",
        domain="acme.example",  # type: ignore[arg-type]
    )
    return InMemoryContactStore([jane, acme])


# ---------------------------------------------------------------------------
# Example 1: Built-in presets
# ---------------------------------------------------------------------------


def show_presets(store: InMemoryContactStore) -> None:
    registry = default_registry(store=store)
    for name in registry:
        result = registry.resolve(name).format(store.get_all())
        print(f"=== {name} ({result.rendered_count}/{result.record_count} records) ===")
        print(result.text)


# ---------------------------------------------------------------------------
# Example 2: A Markdown target
# ---------------------------------------------------------------------------


@value_rule(field=MailField)
def _mailto(fmt: Any, field: MailField, style: Style | None, record: Record) -> str:
    return f"[{field.address}](mailto:{field.address})"


class MarkdownFormatter(RecordFormatter):
    """Renders each record as a Markdown section with a bullet list."""

    render_rules: ClassVar[tuple[RenderRule, ...]] = (_mailto,)
    record_separator = "\n"

    @property
    def format_type(self) -> str:
        return "markdown"

    def format_record_header(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        lines = [f"## {record.name}"]
        lines.extend(f"*{self.compose(entry, record)[1]}*" for entry in entries)
        return "\n".join(lines) + "\n\n"

    def format_record_body(self, record: Record, entries: Sequence[FieldEntry]) -> str:
        rows = [self.compose(entry, record) for entry in entries]
        return "".join(f"- **{label}**: {value}\n" for label, value in rows)


def show_markdown(store: InMemoryContactStore) -> None:
    config = FormatterConfig(combine=frozenset({FieldClass.MAIL}))
    result = MarkdownFormatter(config, store=store).format(store.get_all())
    print("=== markdown ===")
    print(result.text)


if __name__ == "__main__":
    contacts = build_store()
    show_presets(contacts)
    show_markdown(contacts)
