"""Field collection: gather the candidate fields of a record.

Each record kind has its own gatherer.  A gatherer contributes the
collections its kind introduces, then explicitly calls the gatherer of the
next more general kind, so every collection is contributed exactly once::

    person        -> entity -> generic
    organization  -> entity -> generic
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from rolodex.models.config import FormatterConfig
from rolodex.models.fields import ContactField
from rolodex.models.records import (
    EntityRecord,
    OrganizationRecord,
    PersonRecord,
    Record,
    RecordKind,
)
from rolodex.protocols.storage import ContactStore

logger = logging.getLogger(__name__)

Gatherer = Callable[[FormatterConfig, Record, ContactStore | None], list[ContactField]]


def _admitted(config: FormatterConfig, fields: Iterable[ContactField | None]) -> list[ContactField]:
    return [field for field in fields if field is not None and config.admits(field.field_class)]


def _gather_generic(
    config: FormatterConfig, record: Record, store: ContactStore | None
) -> list[ContactField]:
    return _admitted(
        config,
        [
            record.uuid,
            record.creation_date,
            record.timestamp,
            *record.notes,
            *record.images,
            *record.urls,
        ],
    )


def _gather_entity(
    config: FormatterConfig, record: Record, store: ContactStore | None
) -> list[ContactField]:
    if not isinstance(record, EntityRecord):
        msg = f"Entity gatherer called with a '{record.kind}' record"
        raise TypeError(msg)
    mail: Iterable[ContactField | None] = (
        [record.primary_mail] if config.primary else record.mail
    )
    own = _admitted(config, [*mail, *record.phone, *record.address])
    return own + _gather_generic(config, record, store)


def _gather_person(
    config: FormatterConfig, record: Record, store: ContactStore | None
) -> list[ContactField]:
    if not isinstance(record, PersonRecord):
        msg = f"Person gatherer called with a '{record.kind}' record"
        raise TypeError(msg)
    own = _admitted(config, [*record.aka, *record.organizations, *record.relations])
    return own + _gather_entity(config, record, store)


def _gather_organization(
    config: FormatterConfig, record: Record, store: ContactStore | None
) -> list[ContactField]:
    if not isinstance(record, OrganizationRecord):
        msg = f"Organization gatherer called with a '{record.kind}' record"
        raise TypeError(msg)
    affiliations = store.roles_for_organization(record.record_uuid) if store is not None else []
    own = _admitted(config, [record.domain, *affiliations])
    return own + _gather_entity(config, record, store)


_GATHERERS: dict[RecordKind, Gatherer] = {
    RecordKind.GENERIC: _gather_generic,
    RecordKind.ENTITY: _gather_entity,
    RecordKind.PERSON: _gather_person,
    RecordKind.ORGANIZATION: _gather_organization,
}


def collect(
    config: FormatterConfig,
    record: Record,
    store: ContactStore | None = None,
) -> list[ContactField]:
    """Return every field of *record* that passes the config's field policy.

    A field is kept when ``config.include`` is non-empty and names its
    class, or, with an empty ``include``, when ``config.exclude`` does not
    name its class.  With ``config.primary`` set, the mail collection is
    reduced to the primary-flagged mail before the policy applies.

    Parameters:
        config: The formatting policy.
        record: The record to read.  It is never modified.
        store: Contact store used for an organization's reverse
            affiliation lookup.  Without one, organizations contribute no
            affiliation fields.

    Returns:
        The admitted fields.  Their order is not meaningful; use
        :func:`~rolodex.pipeline.sort.sort_fields` to order them.
    """
    fields = _GATHERERS[record.record_kind](config, record, store)
    logger.debug("Collected %d fields from %r", len(fields), record)
    return fields
