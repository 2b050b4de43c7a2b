"""Render result models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderFailure(BaseModel):
    """A record that could not be rendered during a batch pass."""

    record_uuid: str
    record_name: str = ""
    error_type: str
    message: str


class RenderResult(BaseModel):
    """The output of rendering a batch of records.

    Contains the rendered text, the coding it is meant to be written with,
    and diagnostics about records that failed to render.
    """

    text: str = ""
    coding: str = "utf-8"
    format_type: str = "plain"
    record_count: int = Field(default=0, ge=0)
    rendered_count: int = Field(default=0, ge=0)
    failures: list[RenderFailure] = Field(default_factory=list)
    build_time_ms: float = Field(default=0.0, ge=0.0)

    @property
    def ok(self) -> bool:
        """``True`` when every record rendered."""
        return not self.failures

    def encode(self, errors: str = "strict") -> bytes:
        """Encode :attr:`text` with :attr:`coding`."""
        return self.text.encode(self.coding, errors=errors)
