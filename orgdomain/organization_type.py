"""Kinds of organisation."""

from __future__ import annotations

import enum


class OrganizationType(enum.Enum):
    """The kind of organisational unit or external organisation."""

    COMPANY = "Company"
    DIVISION = "Division"
    DEPARTMENT = "Department"
    TEAM = "Team"
    PROJECT = "Project"
    PARTNER = "Partner"
    CUSTOMER = "Customer"
    VENDOR = "Vendor"
    GOVERNMENT = "Government"
    NON_PROFIT = "NonProfit"
    EDUCATIONAL = "Educational"
    HEALTHCARE = "Healthcare"
    CUSTOM = "Custom"

    def is_internal(self) -> bool:
        return self in _INTERNAL

    def is_external(self) -> bool:
        return self in _EXTERNAL

    def hierarchical_level(self) -> int:
        """Level in the internal hierarchy; lower is higher, 0 for non-hierarchical."""
        return _HIERARCHICAL_LEVELS.get(self, 0)

    def can_parent(self, child: OrganizationType) -> bool:
        """Whether a unit of this type may contain a unit of type ``child``."""
        if not self.is_internal() or not child.is_internal():
            return False
        return self.hierarchical_level() < child.hierarchical_level()

    @classmethod
    def default(cls) -> OrganizationType:
        return cls.COMPANY

    def __str__(self) -> str:
        return "Non-Profit" if self is OrganizationType.NON_PROFIT else self.value


_INTERNAL = frozenset(
    {
        OrganizationType.COMPANY,
        OrganizationType.DIVISION,
        OrganizationType.DEPARTMENT,
        OrganizationType.TEAM,
        OrganizationType.PROJECT,
    }
)

_EXTERNAL = frozenset(
    {
        OrganizationType.PARTNER,
        OrganizationType.CUSTOMER,
        OrganizationType.VENDOR,
        OrganizationType.GOVERNMENT,
        OrganizationType.NON_PROFIT,
        OrganizationType.EDUCATIONAL,
        OrganizationType.HEALTHCARE,
    }
)

_HIERARCHICAL_LEVELS = {
    OrganizationType.COMPANY: 1,
    OrganizationType.DIVISION: 2,
    OrganizationType.DEPARTMENT: 3,
    OrganizationType.TEAM: 4,
    OrganizationType.PROJECT: 4,
}