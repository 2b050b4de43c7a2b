"""Render callback protocol for observability and event hooks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from rolodex.models.records import Record
from rolodex.models.result import RenderResult


@runtime_checkable
class RenderCallback(Protocol):
    """Protocol for render pass event callbacks.

    Implement this protocol to receive events while a formatter renders a
    batch.  Callbacks only need the methods they care about; missing
    methods are skipped, and exceptions raised by a callback are logged
    and never interrupt the render.
    """

    def on_render_start(self, records: Sequence[Record]) -> None: ...
    def on_record_end(self, record: Record, text: str) -> None: ...
    def on_record_error(self, record: Record, error: Exception) -> None: ...
    def on_render_end(self, result: RenderResult) -> None: ...
