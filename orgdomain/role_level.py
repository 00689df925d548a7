"""Role levels in an organisational hierarchy."""

from __future__ import annotations

import enum
import functools


@functools.total_ordering
class RoleLevel(enum.Enum):
    """Seniority of a role; members are ordered from most to least senior."""

    EXECUTIVE = "Executive"
    VICE_PRESIDENT = "VicePresident"
    DIRECTOR = "Director"
    MANAGER = "Manager"
    LEAD = "Lead"
    SENIOR = "Senior"
    MID = "Mid"
    JUNIOR = "Junior"
    ENTRY = "Entry"
    INTERN = "Intern"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RoleLevel):
            return NotImplemented
        return self.numeric_level() < other.numeric_level()

    def __hash__(self) -> int:
        return hash(self.value)

    def numeric_level(self) -> int:
        """Numeric rank, where a lower number means a higher rank."""
        return _NUMERIC_LEVELS[self]

    def can_manage(self, other: RoleLevel) -> bool:
        """Whether this level ranks above ``other``."""
        return self.numeric_level() < other.numeric_level()

    def is_management(self) -> bool:
        return self in _MANAGEMENT

    def is_individual_contributor(self) -> bool:
        return self in _INDIVIDUAL_CONTRIBUTORS

    def typical_reporting_span(self) -> tuple[int, int]:
        """Typical (minimum, maximum) number of direct reports."""
        return _REPORTING_SPANS.get(self, (0, 0))

    @classmethod
    def default(cls) -> RoleLevel:
        return cls.MID

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_NUMERIC_LEVELS = {level: rank for rank, level in enumerate(RoleLevel, start=1)}

_MANAGEMENT = frozenset(
    {
        RoleLevel.EXECUTIVE,
        RoleLevel.VICE_PRESIDENT,
        RoleLevel.DIRECTOR,
        RoleLevel.MANAGER,
        RoleLevel.LEAD,
    }
)

_INDIVIDUAL_CONTRIBUTORS = frozenset(
    {
        RoleLevel.SENIOR,
        RoleLevel.MID,
        RoleLevel.JUNIOR,
        RoleLevel.ENTRY,
        RoleLevel.INTERN,
    }
)

_REPORTING_SPANS = {
    RoleLevel.EXECUTIVE: (3, 10),
    RoleLevel.VICE_PRESIDENT: (3, 8),
    RoleLevel.DIRECTOR: (3, 7),
    RoleLevel.MANAGER: (3, 10),
    RoleLevel.LEAD: (2, 6),
}

_DISPLAY_NAMES = {
    RoleLevel.EXECUTIVE: "Executive",
    RoleLevel.VICE_PRESIDENT: "Vice President",
    RoleLevel.DIRECTOR: "Director",
    RoleLevel.MANAGER: "Manager",
    RoleLevel.LEAD: "Lead",
    RoleLevel.SENIOR: "Senior",
    RoleLevel.MID: "Mid-Level",
    RoleLevel.JUNIOR: "Junior",
    RoleLevel.ENTRY: "Entry-Level",
    RoleLevel.INTERN: "Intern",
}