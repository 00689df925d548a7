"""Roles, permissions and member assignments within an organisation."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Union

from orgdomain.role_level import RoleLevel


class Permission(enum.Enum):
    """Built-in permissions that can be granted to a role."""

    CREATE_ORGANIZATION = "CreateOrganization"
    UPDATE_ORGANIZATION = "UpdateOrganization"
    DELETE_ORGANIZATION = "DeleteOrganization"
    VIEW_ORGANIZATION = "ViewOrganization"

    ADD_MEMBER = "AddMember"
    REMOVE_MEMBER = "RemoveMember"
    UPDATE_MEMBER_ROLE = "UpdateMemberRole"
    VIEW_MEMBERS = "ViewMembers"

    CREATE_SUB_UNIT = "CreateSubUnit"
    REMOVE_SUB_UNIT = "RemoveSubUnit"
    MODIFY_HIERARCHY = "ModifyHierarchy"

    VIEW_BUDGET = "ViewBudget"
    APPROVE_BUDGET = "ApproveBudget"
    MODIFY_BUDGET = "ModifyBudget"

    VIEW_REPORTS = "ViewReports"
    CREATE_REPORTS = "CreateReports"
    EXPORT_DATA = "ExportData"


@dataclass(frozen=True)
class CustomPermission:
    """An application-defined permission identified by name."""

    name: str

    def __str__(self) -> str:
        return self.name


AnyPermission = Union[Permission, CustomPermission]


def all_permissions() -> set[Permission]:
    """Every built-in permission."""
    return set(Permission)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class OrganizationRole:
    """A role within an organisation, with its level and permissions."""

    role_code: str
    title: str
    level: RoleLevel
    role_id: uuid.UUID = field(default_factory=uuid.uuid4)
    department: str | None = None
    permissions: set[AnyPermission] = field(default_factory=set)
    attributes: dict[str, str] = field(default_factory=dict)

    def add_permission(self, permission: AnyPermission) -> None:
        self.permissions.add(permission)

    def remove_permission(self, permission: AnyPermission) -> bool:
        """Remove ``permission``; return whether it was present."""
        if permission in self.permissions:
            self.permissions.discard(permission)
            return True
        return False

    def has_permission(self, permission: AnyPermission) -> bool:
        return permission in self.permissions

    @classmethod
    def _with_permissions(
        cls, role_code: str, title: str, level: RoleLevel, permissions: set[AnyPermission]
    ) -> OrganizationRole:
        return cls(role_code, title, level, permissions=set(permissions))

    @classmethod
    def ceo(cls) -> OrganizationRole:
        """Chief Executive Officer, holding every built-in permission."""
        return cls._with_permissions(
            "CEO", "Chief Executive Officer", RoleLevel.EXECUTIVE, all_permissions()
        )

    @classmethod
    def cto(cls) -> OrganizationRole:
        """Chief Technology Officer, without budget approval or changes."""
        return cls._with_permissions(
            "CTO",
            "Chief Technology Officer",
            RoleLevel.EXECUTIVE,
            {
                Permission.VIEW_ORGANIZATION,
                Permission.UPDATE_ORGANIZATION,
                Permission.ADD_MEMBER,
                Permission.REMOVE_MEMBER,
                Permission.UPDATE_MEMBER_ROLE,
                Permission.VIEW_MEMBERS,
                Permission.CREATE_SUB_UNIT,
                Permission.REMOVE_SUB_UNIT,
                Permission.MODIFY_HIERARCHY,
                Permission.VIEW_BUDGET,
                Permission.VIEW_REPORTS,
                Permission.CREATE_REPORTS,
                Permission.EXPORT_DATA,
            },
        )

    @classmethod
    def vp_engineering(cls) -> OrganizationRole:
        return cls._with_permissions(
            "VP_ENG",
            "Vice President of Engineering",
            RoleLevel.VICE_PRESIDENT,
            {
                Permission.VIEW_ORGANIZATION,
                Permission.ADD_MEMBER,
                Permission.REMOVE_MEMBER,
                Permission.UPDATE_MEMBER_ROLE,
                Permission.VIEW_MEMBERS,
                Permission.CREATE_SUB_UNIT,
                Permission.VIEW_BUDGET,
                Permission.VIEW_REPORTS,
                Permission.CREATE_REPORTS,
                Permission.EXPORT_DATA,
            },
        )

    @classmethod
    def engineering_manager(cls) -> OrganizationRole:
        return cls._with_permissions(
            "ENG_MGR",
            "Engineering Manager",
            RoleLevel.MANAGER,
            {
                Permission.VIEW_ORGANIZATION,
                Permission.ADD_MEMBER,
                Permission.UPDATE_MEMBER_ROLE,
                Permission.VIEW_MEMBERS,
                Permission.VIEW_BUDGET,
                Permission.VIEW_REPORTS,
                Permission.CREATE_REPORTS,
            },
        )

    @classmethod
    def software_engineer(cls) -> OrganizationRole:
        return cls._with_permissions(
            "SW_ENG",
            "Software Engineer",
            RoleLevel.MID,
            {
                Permission.VIEW_ORGANIZATION,
                Permission.VIEW_MEMBERS,
                Permission.VIEW_REPORTS,
            },
        )


@dataclass
class OrganizationMember:
    """A person's assignment to a role in an organisation."""

    person_id: uuid.UUID
    organization_id: uuid.UUID
    role: OrganizationRole
    joined_at: datetime = field(default_factory=_now)
    ends_at: datetime | None = None
    reports_to: uuid.UUID | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_active(self) -> bool:
        """True unless the assignment has an end date that has passed."""
        return self.ends_at is None or _now() < self.ends_at