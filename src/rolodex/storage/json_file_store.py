"""JSON-file-backed contact store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rolodex.exceptions import StorageError
from rolodex.models.fields import RoleField
from rolodex.models.records import Record, load_records

from .memory_store import InMemoryContactStore

logger = logging.getLogger(__name__)


class JsonFileContactStore:
    """Read-only contact store loaded from a JSON file.

    The file holds a list of record objects, each tagged with its ``kind``
    (``"generic"``, ``"entity"``, ``"person"`` or ``"organization"``).
    Implements the ``ContactStore`` protocol.

    Example::

        store = JsonFileContactStore("contacts.json")
        result = PlainTextFormatter(store=store).format(store.get_all())
    """

    __slots__ = ("_file_path", "_store")

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path).resolve()
        self._store = InMemoryContactStore()
        self.load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> None:
        """(Re)load records from the JSON file on disk.

        Raises:
            StorageError: If the file is missing, is not valid JSON, or
                does not describe a list of valid records.
        """
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Failed to read contact file {self._file_path}"
            raise StorageError(msg) from e

        self._store.clear()
        if not text.strip():
            return

        try:
            raw: Any = json.loads(text)
        except json.JSONDecodeError as e:
            msg = f"Failed to load contacts from {self._file_path}: invalid JSON"
            raise StorageError(msg) from e

        if not isinstance(raw, list):
            msg = f"Failed to load contacts from {self._file_path}: expected a list of records"
            raise StorageError(msg)

        try:
            records = load_records(raw)
        except ValidationError as e:
            msg = (
                f"Failed to load contacts from {self._file_path}: "
                f"{e.error_count()} invalid value(s)"
            )
            raise StorageError(msg) from e

        for record in records:
            self._store.add(record)
        logger.debug("Loaded %d records from %s", len(records), self._file_path)

    def get(self, record_uuid: str) -> Record | None:
        return self._store.get(record_uuid)

    def get_all(self) -> list[Record]:
        return self._store.get_all()

    def roles_for_organization(self, organization_uuid: str) -> list[RoleField]:
        return self._store.roles_for_organization(organization_uuid)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path='{self._file_path}', records={len(self._store)})"
