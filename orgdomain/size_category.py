"""Organisation size classification by head count."""

from __future__ import annotations

import enum


class SizeCategory(enum.Enum):
    """Size bracket of an organisation, based on employee count."""

    STARTUP = "Startup"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    ENTERPRISE = "Enterprise"
    MEGA_CORP = "MegaCorp"

    @classmethod
    def from_employee_count(cls, count: int) -> SizeCategory:
        if count <= 10:
            return cls.STARTUP
        if count <= 50:
            return cls.SMALL
        if count <= 250:
            return cls.MEDIUM
        if count <= 1000:
            return cls.LARGE
        if count <= 5000:
            return cls.ENTERPRISE
        return cls.MEGA_CORP

    def employee_range(self) -> tuple[int, int | None]:
        """(minimum, maximum) employees; maximum is None when unbounded."""
        return _EMPLOYEE_RANGES[self]

    def typical_budget_range(self) -> tuple[float, float | None]:
        """Typical budget in millions of USD; maximum is None when unbounded."""
        return _BUDGET_RANGES[self]

    def typical_department_count(self) -> tuple[int, int]:
        return _DEPARTMENT_COUNTS[self]

    def typical_management_layers(self) -> int:
        return _MANAGEMENT_LAYERS[self]

    @classmethod
    def default(cls) -> SizeCategory:
        return cls.SMALL

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_EMPLOYEE_RANGES = {
    SizeCategory.STARTUP: (1, 10),
    SizeCategory.SMALL: (11, 50),
    SizeCategory.MEDIUM: (51, 250),
    SizeCategory.LARGE: (251, 1000),
    SizeCategory.ENTERPRISE: (1001, 5000),
    SizeCategory.MEGA_CORP: (5001, None),
}

_BUDGET_RANGES = {
    SizeCategory.STARTUP: (0.1, 1.0),
    SizeCategory.SMALL: (1.0, 10.0),
    SizeCategory.MEDIUM: (10.0, 50.0),
    SizeCategory.LARGE: (50.0, 500.0),
    SizeCategory.ENTERPRISE: (500.0, 5000.0),
    SizeCategory.MEGA_CORP: (5000.0, None),
}

_DEPARTMENT_COUNTS = {
    SizeCategory.STARTUP: (1, 3),
    SizeCategory.SMALL: (3, 8),
    SizeCategory.MEDIUM: (8, 20),
    SizeCategory.LARGE: (20, 50),
    SizeCategory.ENTERPRISE: (50, 200),
    SizeCategory.MEGA_CORP: (200, 1000),
}

_MANAGEMENT_LAYERS = {
    SizeCategory.STARTUP: 2,
    SizeCategory.SMALL: 3,
    SizeCategory.MEDIUM: 4,
    SizeCategory.LARGE: 5,
    SizeCategory.ENTERPRISE: 6,
    SizeCategory.MEGA_CORP: 7,
}

_DISPLAY_NAMES = {
    SizeCategory.STARTUP: "Startup (1-10 employees)",
    SizeCategory.SMALL: "Small (11-50 employees)",
    SizeCategory.MEDIUM: "Medium (51-250 employees)",
    SizeCategory.LARGE: "Large (251-1000 employees)",
    SizeCategory.ENTERPRISE: "Enterprise (1001-5000 employees)",
    SizeCategory.MEGA_CORP: "MegaCorp (5000+ employees)",
}