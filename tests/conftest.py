"""Shared fixtures for rolodex tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from rolodex.models.fields import (
    AddressField,
    CreationDateField,
    ImageField,
    MailField,
    NameField,
    NotesField,
    PhoneField,
    RelationField,
    RoleField,
    TimestampField,
    UuidField,
)
from rolodex.models.records import OrganizationRecord, PersonRecord
from rolodex.storage.memory_store import InMemoryContactStore

PERSON_UUID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
ORG_UUID = "16fd2706-8baf-433b-82eb-8c7fada847da"
FRIEND_UUID = "886313e1-3b8a-5372-9b90-0c9aee199e5d"


def make_mail(address: str, *, primary: bool = False, name: str | None = None) -> MailField:
    """Build a MailField, flagged primary when requested."""
    return MailField(address=address, name=name, priority="primary" if primary else "normal")


def make_phone(label: str, number: str) -> PhoneField:
    return PhoneField(label=label, number=number)


def make_address(label: str = "home") -> AddressField:
    return AddressField(
        label=label,
        streets=("1 Main St", "Apt 2"),
        locality="Springfield",
        region="IL",
        postcode="62701",
        country="USA",
    )


def make_role(
    *,
    label: str = "employee",
    title: str | None = "CTO",
    person_uuid: str = PERSON_UUID,
    person_name: str = "Jane Doe",
) -> RoleField:
    return RoleField(
        label=label,
        organization_uuid=ORG_UUID,
        organization_name="Acme Corp",
        record_uuid=person_uuid,
        record_name=person_name,
        title=title,
    )


def make_person(**overrides: object) -> PersonRecord:
    """Build a PersonRecord with sensible test defaults.

    Keyword arguments override any record attribute.
    """
    data: dict[str, object] = {
        "uuid": UuidField(value=PERSON_UUID),
        "name": "Jane Doe",
        "creation_date": CreationDateField(value=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)),
        "timestamp": TimestampField(value=datetime(2024, 6, 7, 8, 9, 10, tzinfo=UTC)),
        "mail": (make_mail("a@example.com", primary=True),),
        "phone": (make_phone("work", "+1 555 0100"),),
    }
    data.update(overrides)
    return PersonRecord(**data)  # type: ignore[arg-type]


def make_organization(**overrides: object) -> OrganizationRecord:
    data: dict[str, object] = {
        "uuid": UuidField(value=ORG_UUID),
        "name": "Acme Corp",
        "domain": "acme.example",
        "phone": (make_phone("main", "+1 555 0199"),),
    }
    data.update(overrides)
    return OrganizationRecord(**data)  # type: ignore[arg-type]


@pytest.fixture
def person() -> PersonRecord:
    """A person with one primary mail and one work phone."""
    return make_person()


@pytest.fixture
def full_person() -> PersonRecord:
    """A person carrying every person-level collection."""
    return make_person(
        mail=(
            make_mail("jane@example.com", primary=True),
            make_mail("jd@work.example"),
        ),
        phone=(make_phone("work", "+1 555 0100"), make_phone("home", "+1 555 0111")),
        address=(make_address(),),
        aka=(NameField(name="JD"),),
        organizations=(make_role(),),
        relations=(RelationField(label="friend", target_uuid=FRIEND_UUID, target_name="Bob"),),
        notes=(NotesField(text="Met at PyCon.\nLikes tea."),),
        images=(ImageField(path="jane.png"),),
    )


@pytest.fixture
def organization() -> OrganizationRecord:
    return make_organization()


@pytest.fixture
def store(full_person: PersonRecord, organization: OrganizationRecord) -> InMemoryContactStore:
    """A store holding the full person and the organization they work for."""
    return InMemoryContactStore([full_person, organization])
