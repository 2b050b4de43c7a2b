"""Field sorting: group and order collected fields by the config's selectors."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rolodex.models.config import WILDCARD, FormatterConfig
from rolodex.models.fields import ContactField, FieldClass

logger = logging.getLogger(__name__)


def _grouped(fields: Sequence[ContactField]) -> list[ContactField]:
    """Group *fields* by class, classes in order of first appearance."""
    groups: dict[FieldClass, list[ContactField]] = {}
    for field in fields:
        groups.setdefault(field.field_class, []).append(field)
    return [field for group in groups.values() for field in group]


def sort_fields(config: FormatterConfig, fields: Sequence[ContactField]) -> list[ContactField]:
    """Order *fields* into contiguous class groups following ``config.sort``.

    Selectors are processed left to right against a pool of remaining
    fields.  A class selector moves every remaining field of that class to
    the output.  The wildcard moves every remaining field whose class is not
    named by *any* explicit selector, including selectors placed after the
    wildcard, so a later explicit selector always gets its own fields.
    Classes captured by the wildcard appear in order of first appearance.

    Fields no selector captures are dropped, unless ``config.keep_unsorted``
    is set, in which case they follow the sorted groups.

    The sort is stable: fields of one class keep their input order.
    """
    explicit = config.explicit_selectors
    remaining = list(fields)
    ordered: list[ContactField] = []

    for selector in config.sort:
        captured: list[ContactField] = []
        kept: list[ContactField] = []
        for field in remaining:
            if selector == WILDCARD:
                hit = field.field_class not in explicit
            else:
                hit = field.field_class == selector
            (captured if hit else kept).append(field)
        ordered.extend(_grouped(captured))
        remaining = kept

    if remaining:
        if config.keep_unsorted:
            ordered.extend(_grouped(remaining))
        else:
            logger.debug(
                "Dropping %d field(s) matched by no sort selector: %s",
                len(remaining),
                sorted({f.field_class.value for f in remaining}),
            )
    return ordered
