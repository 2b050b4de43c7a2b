"""In-memory contact store for development and testing.

Production users provide their own implementation (a database adapter,
an address-book bridge, ...) that satisfies the ``ContactStore`` protocol.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from rolodex.models.fields import RoleField
from rolodex.models.records import PersonRecord, Record


class InMemoryContactStore:
    """Dict-backed contact store. Implements the ContactStore protocol."""

    __slots__ = ("_lock", "_records")

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: dict[str, Record] = {}
        self._lock = threading.Lock()
        for record in records:
            self.add(record)

    def add(self, record: Record) -> None:
        with self._lock:
            self._records[record.record_uuid] = record

    def get(self, record_uuid: str) -> Record | None:
        with self._lock:
            return self._records.get(record_uuid)

    def get_all(self) -> list[Record]:
        with self._lock:
            return list(self._records.values())

    def delete(self, record_uuid: str) -> bool:
        with self._lock:
            return self._records.pop(record_uuid, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def roles_for_organization(self, organization_uuid: str) -> list[RoleField]:
        with self._lock:
            records = list(self._records.values())
        roles: list[RoleField] = []
        for record in records:
            if not isinstance(record, PersonRecord):
                continue
            roles.extend(
                role for role in record.organizations
                if role.organization_uuid == organization_uuid
            )
        return roles

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self._records)})"
