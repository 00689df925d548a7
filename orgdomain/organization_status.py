"""Lifecycle status of an organisation."""

from __future__ import annotations

import enum


class OrganizationStatus(enum.Enum):
    """Where an organisation is in its lifecycle."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PENDING = "Pending"
    MERGED = "Merged"
    ACQUIRED = "Acquired"
    DISSOLVED = "Dissolved"
    ARCHIVED = "Archived"

    def is_operational(self) -> bool:
        return self in (OrganizationStatus.ACTIVE, OrganizationStatus.PENDING)

    def can_have_members(self) -> bool:
        return self in (
            OrganizationStatus.ACTIVE,
            OrganizationStatus.PENDING,
            OrganizationStatus.INACTIVE,
        )

    def can_be_modified(self) -> bool:
        return self in (
            OrganizationStatus.ACTIVE,
            OrganizationStatus.PENDING,
            OrganizationStatus.INACTIVE,
        )

    def valid_transitions(self) -> list[OrganizationStatus]:
        """Statuses this status may move to, in a fixed order."""
        return list(_TRANSITIONS[self])

    def can_transition_to(self, new_status: OrganizationStatus) -> bool:
        return new_status in _TRANSITIONS[self]

    @classmethod
    def default(cls) -> OrganizationStatus:
        return cls.PENDING

    def __str__(self) -> str:
        return self.value


_TRANSITIONS = {
    OrganizationStatus.PENDING: (OrganizationStatus.ACTIVE, OrganizationStatus.DISSOLVED),
    OrganizationStatus.ACTIVE: (
        OrganizationStatus.INACTIVE,
        OrganizationStatus.MERGED,
        OrganizationStatus.ACQUIRED,
        OrganizationStatus.DISSOLVED,
    ),
    OrganizationStatus.INACTIVE: (
        OrganizationStatus.ACTIVE,
        OrganizationStatus.DISSOLVED,
        OrganizationStatus.ARCHIVED,
    ),
    OrganizationStatus.MERGED: (OrganizationStatus.ARCHIVED,),
    OrganizationStatus.ACQUIRED: (OrganizationStatus.ARCHIVED,),
    OrganizationStatus.DISSOLVED: (OrganizationStatus.ARCHIVED,),
    OrganizationStatus.ARCHIVED: (),
}