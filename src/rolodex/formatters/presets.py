"""Preset configurations and the default formatter registry.

These provide sensible defaults for the built-in output targets.  Every
preset can be customised with :meth:`FormatterConfig.with_options` or by
constructing a ``FormatterConfig`` directly.
"""

from __future__ import annotations

from rolodex.models.config import WILDCARD, FormatterConfig
from rolodex.models.fields import FieldClass
from rolodex.protocols.storage import ContactStore

from .html import HtmlFormatter
from .latex import LatexFormatter
from .plain import PlainTextFormatter
from .registry import FormatterRegistry
from .vcard import VCardFormatter


def default_plain_config() -> FormatterConfig:
    """Full plain-text display: every field except bookkeeping ones."""
    return FormatterConfig()


def oneline_plain_config() -> FormatterConfig:
    """Terse plain-text display.

    Only the primary mail is shown, phones are combined on one line, and
    bookkeeping fields, notes and images are hidden.
    """
    return FormatterConfig(
        primary=True,
        exclude=frozenset(
            {
                FieldClass.UUID,
                FieldClass.TIMESTAMP,
                FieldClass.CREATION_DATE,
                FieldClass.NOTES,
                FieldClass.IMAGE,
            }
        ),
        combine=frozenset({FieldClass.MAIL, FieldClass.PHONE}),
    )


def vcard_config() -> FormatterConfig:
    """vCard export: keeps identity and revision fields, no header split."""
    return FormatterConfig(
        exclude=frozenset(),
        sort=(
            FieldClass.NAME,
            FieldClass.MAIL,
            FieldClass.PHONE,
            FieldClass.ADDRESS,
            WILDCARD,
            FieldClass.UUID,
            FieldClass.TIMESTAMP,
        ),
        header={},
    )


def latex_config() -> FormatterConfig:
    """LaTeX export: full records with addresses kept in one row each."""
    return FormatterConfig(
        exclude=frozenset(
            {
                FieldClass.UUID,
                FieldClass.TIMESTAMP,
                FieldClass.CREATION_DATE,
                FieldClass.IMAGE,
            }
        ),
        combine=frozenset({FieldClass.MAIL}),
    )


def html_config() -> FormatterConfig:
    """HTML export: long addresses and notes collapse behind their first line."""
    return FormatterConfig(
        collapse=frozenset({FieldClass.ADDRESS, FieldClass.NOTES}),
    )


def default_registry(store: ContactStore | None = None) -> FormatterRegistry:
    """Build a registry with the built-in presets.

    Registered names: ``plain``, ``plain-oneline``, ``vcard``, ``latex``,
    ``html``.

    Parameters:
        store: Contact store handed to every formatter, used to list an
            organization's affiliates.

    Returns:
        A new ``FormatterRegistry`` owned by the caller.
    """
    registry = FormatterRegistry()
    registry.register("plain", PlainTextFormatter(default_plain_config(), store=store))
    registry.register("plain-oneline", PlainTextFormatter(oneline_plain_config(), store=store))
    registry.register("vcard", VCardFormatter(vcard_config(), store=store))
    registry.register("latex", LatexFormatter(latex_config(), store=store))
    registry.register("html", HtmlFormatter(html_config(), store=store))
    return registry
