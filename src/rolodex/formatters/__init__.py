"""Output formatters for different target representations."""

from .base import Formatter
from .dispatch import RenderRule, label_rule, resolve_rule, value_rule
from .html import HtmlFormatter
from .latex import LatexFormatter
from .plain import PlainTextFormatter
from .presets import (
    default_plain_config,
    default_registry,
    html_config,
    latex_config,
    oneline_plain_config,
    vcard_config,
)
from .record import RecordFormatter
from .registry import FormatterRegistry
from .vcard import VCardFormatter

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "HtmlFormatter",
    "LatexFormatter",
    "PlainTextFormatter",
    "RecordFormatter",
    "RenderRule",
    "VCardFormatter",
    "default_plain_config",
    "default_registry",
    "html_config",
    "label_rule",
    "latex_config",
    "oneline_plain_config",
    "resolve_rule",
    "value_rule",
    "vcard_config",
]
