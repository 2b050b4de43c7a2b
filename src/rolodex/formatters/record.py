"""RecordFormatter -- the shared record renderer behind every output target."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from rolodex._callbacks import notify
from rolodex.exceptions import ConfigurationError, RecordRenderError, RolodexError
from rolodex.models.config import FormatterConfig
from rolodex.models.entry import FieldEntry, Style
from rolodex.models.fields import ContactField, FieldClass, LabeledField, RoleField
from rolodex.models.records import Record, RecordKind
from rolodex.models.result import RenderFailure, RenderResult
from rolodex.pipeline.callbacks import RenderCallback
from rolodex.pipeline.collect import collect
from rolodex.pipeline.process import process_fields
from rolodex.pipeline.sort import sort_fields
from rolodex.protocols.storage import ContactStore

from .dispatch import RenderRule, label_rule, resolve_rule, value_rule
from .utils import first_line

logger = logging.getLogger(__name__)

_REQUIRED_HOOKS: tuple[str, ...] = ("format_record_header", "format_record_body")

# -- Default render rules --


@label_rule(field=FieldClass)
def _class_label(fmt: Any, subject: FieldClass, style: Style | None, record: Record) -> str:
    return subject.display_name


@label_rule()
def _field_label(fmt: Any, subject: ContactField, style: Style | None, record: Record) -> str:
    return subject.field_class.display_name


@label_rule(field=LabeledField)
def _instance_label(fmt: Any, subject: LabeledField, style: Style | None, record: Record) -> str:
    return subject.label or subject.field_class.display_name


@label_rule(field=LabeledField, style=Style.COMPACT)
def _compact_label(fmt: Any, subject: LabeledField, style: Style | None, record: Record) -> str:
    # The instance label moves into the value, see _compact_labeled_value.
    return subject.field_class.display_name


@value_rule()
def _full_value(fmt: Any, field: ContactField, style: Style | None, record: Record) -> str:
    return field.string()


@value_rule(style=Style.ONELINE)
def _oneline_value(fmt: Any, field: ContactField, style: Style | None, record: Record) -> str:
    return first_line(fmt.render_value(field, None, record))


@value_rule(style=Style.COLLAPSE)
def _collapsed_value(fmt: Any, field: ContactField, style: Style | None, record: Record) -> str:
    return first_line(fmt.render_value(field, None, record))


@value_rule(style=Style.COMPACT)
def _compact_value(fmt: Any, field: ContactField, style: Style | None, record: Record) -> str:
    return fmt.render_value(field, Style.ONELINE, record)


@value_rule(field=LabeledField, style=Style.COMPACT)
def _compact_labeled_value(
    fmt: Any, field: LabeledField, style: Style | None, record: Record
) -> str:
    value = fmt.render_value(field, Style.ONELINE, record)
    return f"({field.label}) {value}" if field.label else value


@value_rule(field=RoleField, record=RecordKind.ORGANIZATION)
def _affiliate_value(fmt: Any, field: RoleField, style: Style | None, record: Record) -> str:
    # Seen from the organization, a role names the affiliated record.
    if field.title:
        return f"{field.record_name} ({field.title})"
    return field.record_name


@value_rule(field=RoleField, style=Style.ONELINE, record=RecordKind.ORGANIZATION)
def _oneline_affiliate_value(
    fmt: Any, field: RoleField, style: Style | None, record: Record
) -> str:
    return first_line(fmt.render_value(field, None, record))


_collapsed_affiliate_value = RenderRule(
    "value",
    _oneline_affiliate_value.fn,
    field=RoleField,
    style=Style.COLLAPSE,
    record=RecordKind.ORGANIZATION,
)


@value_rule(field=RoleField, style=Style.COMPACT, record=RecordKind.ORGANIZATION)
def _compact_affiliate_value(
    fmt: Any, field: RoleField, style: Style | None, record: Record
) -> str:
    value = fmt.render_value(field, Style.ONELINE, record)
    return f"({field.label}) {value}" if field.label else value


class RecordFormatter:
    """Base class for output targets built on the field pipeline.

    Rendering one record runs::

        collect -> sort -> process -> header/body split -> render entries

    Subclasses implement ``format_record_header(record, entries)`` and
    ``format_record_body(record, entries)``, may override the batch hooks
    :meth:`format_header` / :meth:`format_footer`, and may declare extra
    ``render_rules``.  Rules declared by a subclass take precedence over the
    inherited ones; anything a subclass leaves out falls back to the
    defaults declared here.

    Parameters
    ----------
    config:
        The formatting policy.  Defaults to ``FormatterConfig()``.
    store:
        Contact store used to look up an organization's affiliations.
    on_error:
        ``"skip"`` (default) isolates a failing record: the failure is
        logged, reported in :attr:`RenderResult.failures`, and the batch
        continues.  ``"raise"`` aborts the batch with the error.
    """

    render_rules: ClassVar[tuple[RenderRule, ...]] = (
        _class_label,
        _field_label,
        _instance_label,
        _compact_label,
        _full_value,
        _oneline_value,
        _collapsed_value,
        _compact_value,
        _compact_labeled_value,
        _affiliate_value,
        _oneline_affiliate_value,
        _collapsed_affiliate_value,
        _compact_affiliate_value,
    )

    record_separator: ClassVar[str] = ""
    """Text placed between consecutive records of a batch."""

    if TYPE_CHECKING:

        def format_record_header(self, record: Record, entries: Sequence[FieldEntry]) -> str: ...
        def format_record_body(self, record: Record, entries: Sequence[FieldEntry]) -> str: ...

    def __init__(
        self,
        config: FormatterConfig | None = None,
        *,
        store: ContactStore | None = None,
        on_error: Literal["raise", "skip"] = "skip",
    ) -> None:
        missing = [name for name in _REQUIRED_HOOKS if not callable(getattr(self, name, None))]
        if missing:
            msg = f"{type(self).__name__} does not implement: {', '.join(missing)}"
            raise ConfigurationError(msg)
        self._config = config or FormatterConfig()
        self._store = store
        self._on_error = on_error
        self._callbacks: list[RenderCallback] = []

    # -- Read-only properties --

    @property
    def format_type(self) -> str:
        return "record"

    @property
    def config(self) -> FormatterConfig:
        """The formatting policy used by every render pass."""
        return self._config

    @property
    def store(self) -> ContactStore | None:
        return self._store

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}(format_type='{self.format_type}', coding='{self._config.coding}')"

    def add_callback(self, callback: RenderCallback) -> RecordFormatter:
        """Register an event callback. Returns self for chaining."""
        self._callbacks.append(callback)
        return self

    # -- Field rendering --

    def render_label(
        self, subject: ContactField | FieldClass, style: Style | None, record: Record
    ) -> str:
        """Render the label of a field instance, or of a whole field class."""
        rule = resolve_rule(self, "label", subject, style, record)
        return rule.fn(self, subject, style, record)

    def render_value(self, field: ContactField, style: Style | None, record: Record) -> str:
        """Render the value of a field instance."""
        rule = resolve_rule(self, "value", field, style, record)
        return rule.fn(self, field, style, record)

    def compose(self, entry: FieldEntry, record: Record) -> tuple[str, str]:
        """Return the ``(label, value)`` pair for an entry.

        Combined entries are labelled by their class and list the value of
        each instance, joined by ``", "``.
        """
        if entry.is_combined:
            label = self.render_label(entry.field_class, entry.style, record)
            value = ", ".join(
                self.render_value(field, entry.style, record) for field in entry.instances
            )
            return label, value
        field = entry.instances[0]
        return (
            self.render_label(field, entry.style, record),
            self.render_value(field, entry.style, record),
        )

    # -- Record rendering --

    def entries(self, record: Record) -> list[FieldEntry]:
        """Run the field pipeline for *record*: collect, sort, process."""
        fields = collect(self._config, record, self._store)
        ordered = sort_fields(self._config, fields)
        return process_fields(self._config, ordered)

    def split_entries(
        self, record: Record, entries: Sequence[FieldEntry]
    ) -> tuple[list[FieldEntry], list[FieldEntry]]:
        """Partition entries into (header, body) by the config's header classes."""
        header_classes = self._config.header_classes(record.record_kind)
        header: list[FieldEntry] = []
        body: list[FieldEntry] = []
        for entry in entries:
            (header if entry.field_class in header_classes else body).append(entry)
        return header, body

    def format_record(self, record: Record) -> str:
        """Render one record: its header section followed by its body section."""
        header, body = self.split_entries(record, self.entries(record))
        return self.format_record_header(record, header) + self.format_record_body(record, body)

    # -- Batch rendering --

    def format_header(self, records: Sequence[Record]) -> str:
        """Text emitted before the first record of a batch."""
        return ""

    def format_footer(self, records: Sequence[Record]) -> str:
        """Text emitted after the last record of a batch."""
        return ""

    def format(self, records: Sequence[Record]) -> RenderResult:
        """Render a batch of records.

        Each record is rendered independently.  With ``on_error="skip"`` a
        record that fails is left out of the text and reported in
        :attr:`RenderResult.failures`; the remaining records still render.

        Raises:
            RolodexError: With ``on_error="raise"``, the first failure.
                Errors that are not rolodex errors are wrapped in
                :class:`RecordRenderError`.
        """
        start = time.perf_counter()
        notify(self._callbacks, "on_render_start", records)

        parts: list[str] = []
        failures: list[RenderFailure] = []
        for record in records:
            try:
                text = self.format_record(record)
            except Exception as e:
                if self._on_error == "raise":
                    if isinstance(e, RolodexError):
                        raise
                    msg = f"Failed to render {record!r}"
                    raise RecordRenderError(msg, record.record_uuid) from e
                logger.warning("Skipping record %r: render failed", record, exc_info=True)
                failures.append(
                    RenderFailure(
                        record_uuid=record.record_uuid,
                        record_name=record.name,
                        error_type=type(e).__name__,
                        message=str(e),
                    )
                )
                notify(self._callbacks, "on_record_error", record, e)
                continue
            parts.append(text)
            notify(self._callbacks, "on_record_end", record, text)

        text = (
            self.format_header(records)
            + self.record_separator.join(parts)
            + self.format_footer(records)
        )
        result = RenderResult(
            text=text,
            coding=self._config.coding,
            format_type=self.format_type,
            record_count=len(records),
            rendered_count=len(parts),
            failures=failures,
            build_time_ms=(time.perf_counter() - start) * 1000,
        )
        logger.debug(
            "Rendered %d/%d records as %s in %.2fms",
            result.rendered_count,
            result.record_count,
            result.format_type,
            result.build_time_ms,
        )
        notify(self._callbacks, "on_render_end", result)
        return result
