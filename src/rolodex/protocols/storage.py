"""Storage protocol definitions.

The render pipeline only reads from a contact store.  Any object matching
these interfaces can be used -- no inheritance required (PEP 544).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rolodex.models.fields import RoleField
from rolodex.models.records import Record


@runtime_checkable
class ContactStore(Protocol):
    """Protocol for the contact database a render pass reads from."""

    def get(self, record_uuid: str) -> Record | None:
        """Retrieve a single record by its uuid.

        Returns:
            The matching ``Record``, or ``None`` if no record with the
            given uuid exists.
        """
        ...

    def get_all(self) -> list[Record]:
        """Return every record currently held in the store."""
        ...

    def roles_for_organization(self, organization_uuid: str) -> list[RoleField]:
        """Return the role fields that point at an organization.

        This is the reverse side of the person -> organization affiliation:
        each role field lives on an affiliated record and carries the
        organization's uuid.

        Parameters:
            organization_uuid: The uuid of the organization record.

        Returns:
            The matching ``RoleField`` objects, in store order.  An empty
            list when nothing is affiliated.
        """
        ...
