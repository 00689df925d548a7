"""Read-model storage for organisation views and memberships."""

from __future__ import annotations

import abc
import copy
import uuid

from orgdomain.projections import MemberOrganizationView, MemberView, OrganizationView
from orgdomain.role_level import RoleLevel


class OrganizationError(Exception):
    """Base error for organisation operations."""


class OrganizationNotFoundError(OrganizationError):
    """Raised when an organisation does not exist."""

    def __init__(self, organization_id: uuid.UUID) -> None:
        super().__init__(f"Organization not found: {organization_id}")
        self.organization_id = organization_id


class ReadModelStore(abc.ABC):
    """Asynchronous store of query-side organisation views."""

    @abc.abstractmethod
    async def get_organization(self, organization_id: uuid.UUID) -> OrganizationView | None:
        """Return the organisation view, or None if unknown."""

    @abc.abstractmethod
    async def get_all_organizations(self) -> list[OrganizationView]:
        """Return every organisation view."""

    @abc.abstractmethod
    async def get_organization_members(self, organization_id: uuid.UUID) -> list[MemberView]:
        """Return the members of an organisation, empty if none."""

    @abc.abstractmethod
    async def get_person_organizations(
        self, person_id: uuid.UUID
    ) -> list[MemberOrganizationView]:
        """Return the organisations a person belongs to, empty if none."""

    @abc.abstractmethod
    async def update_organization(self, view: OrganizationView) -> None:
        """Insert or replace an organisation view."""

    @abc.abstractmethod
    async def update_member(self, organization_id: uuid.UUID, member: MemberView) -> None:
        """Insert or replace a member of an organisation."""

    @abc.abstractmethod
    async def remove_member(self, organization_id: uuid.UUID, person_id: uuid.UUID) -> None:
        """Remove a person from an organisation's members."""


class InMemoryReadModelStore(ReadModelStore):
    """Read-model store held in dictionaries; values are copied in and out."""

    def __init__(self) -> None:
        self._organizations: dict[uuid.UUID, OrganizationView] = {}
        self._members: dict[uuid.UUID, list[MemberView]] = {}
        self._person_organizations: dict[uuid.UUID, list[MemberOrganizationView]] = {}

    async def get_organization(self, organization_id: uuid.UUID) -> OrganizationView | None:
        view = self._organizations.get(organization_id)
        return copy.deepcopy(view) if view is not None else None

    async def get_all_organizations(self) -> list[OrganizationView]:
        return copy.deepcopy(list(self._organizations.values()))

    async def get_organization_members(self, organization_id: uuid.UUID) -> list[MemberView]:
        return copy.deepcopy(self._members.get(organization_id, []))

    async def get_person_organizations(
        self, person_id: uuid.UUID
    ) -> list[MemberOrganizationView]:
        return copy.deepcopy(self._person_organizations.get(person_id, []))

    async def update_organization(self, view: OrganizationView) -> None:
        self._organizations[view.organization_id] = copy.deepcopy(view)

    async def update_member(self, organization_id: uuid.UUID, member: MemberView) -> None:
        stored = copy.deepcopy(member)
        org_members = self._members.setdefault(organization_id, [])
        _replace_or_append(
            org_members, stored, lambda m: m.person_id == stored.person_id
        )

        memberships = self._person_organizations.setdefault(member.person_id, [])
        org_view = self._organizations.get(organization_id)
        if org_view is None:
            return

        membership = MemberOrganizationView(
            organization_id=organization_id,
            organization_name=org_view.name,
            org_type=org_view.org_type,
            role=copy.deepcopy(member.role),
            is_primary=member.role.level >= RoleLevel.MANAGER,
            joined_at=member.joined_at,
        )
        _replace_or_append(
            memberships, membership, lambda m: m.organization_id == organization_id
        )

    async def remove_member(self, organization_id: uuid.UUID, person_id: uuid.UUID) -> None:
        org_members = self._members.get(organization_id)
        if org_members is not None:
            org_members[:] = [m for m in org_members if m.person_id != person_id]

        memberships = self._person_organizations.get(person_id)
        if memberships is not None:
            memberships[:] = [m for m in memberships if m.organization_id != organization_id]


def _replace_or_append(items: list, item, matches) -> None:
    for position, existing in enumerate(items):
        if matches(existing):
            items[position] = item
            return
    items.append(item)