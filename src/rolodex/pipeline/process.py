"""Field processing: turn sorted fields into styled, renderable entries."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rolodex.models.config import FormatterConfig
from rolodex.models.entry import FieldEntry, Style
from rolodex.models.fields import ContactField

logger = logging.getLogger(__name__)


def process_fields(
    config: FormatterConfig, fields: Sequence[ContactField]
) -> list[FieldEntry]:
    """Group *fields* into :class:`FieldEntry` objects and assign their styles.

    Two passes over the sorted fields:

    1. **Combine** -- every maximal run of contiguous fields whose class is
       in ``config.combine`` becomes one ``compact`` entry holding the run.
    2. **Style** -- every other field becomes a single-field entry, styled
       ``collapse`` when its class is in ``config.collapse`` and ``oneline``
       otherwise.

    Entries keep the order of *fields*; nothing is reordered.
    """
    grouped: list[FieldEntry | ContactField] = []
    run: list[ContactField] = []

    def _flush() -> None:
        if run:
            grouped.append(
                FieldEntry(
                    field_class=run[0].field_class, style=Style.COMPACT, instances=tuple(run)
                )
            )
            run.clear()

    for field in fields:
        if field.field_class in config.combine:
            if run and run[0].field_class != field.field_class:
                _flush()
            run.append(field)
        else:
            _flush()
            grouped.append(field)
    _flush()

    entries: list[FieldEntry] = []
    for item in grouped:
        if isinstance(item, FieldEntry):
            entries.append(item)
            continue
        style = Style.COLLAPSE if item.field_class in config.collapse else Style.ONELINE
        entries.append(FieldEntry(field_class=item.field_class, style=style, instances=(item,)))

    logger.debug("Processed %d fields into %d entries", len(fields), len(entries))
    return entries
