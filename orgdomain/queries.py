"""Query messages for reading organisation state."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from orgdomain.organization_status import OrganizationStatus
from orgdomain.organization_type import OrganizationType


@dataclass(frozen=True)
class GetOrganizationById:
    organization_id: uuid.UUID


@dataclass(frozen=True)
class GetOrganizationHierarchy:
    """Hierarchy below an organisation; ``max_depth`` None means unlimited."""

    organization_id: uuid.UUID
    max_depth: int | None = None


@dataclass(frozen=True)
class GetOrganizationMembers:
    organization_id: uuid.UUID
    role_filter: str | None = None
    include_inactive: bool = False


@dataclass(frozen=True)
class GetOrganizationsByType:
    org_type: OrganizationType
    include_children: bool = False


@dataclass(frozen=True)
class GetOrganizationsByStatus:
    status: OrganizationStatus


@dataclass(frozen=True)
class GetMemberOrganizations:
    person_id: uuid.UUID
    include_inactive: bool = False


@dataclass(frozen=True)
class GetReportingStructure:
    """Reporting tree; without a starting person it begins at those with no manager."""

    organization_id: uuid.UUID
    starting_person_id: uuid.UUID | None = None
    max_depth: int | None = None


@dataclass(frozen=True)
class SearchOrganizations:
    """Search by name text, with optional type and status filters."""

    query: str
    limit: int
    org_type_filter: OrganizationType | None = None
    status_filter: OrganizationStatus | None = None


@dataclass(frozen=True)
class GetOrganizationStatistics:
    organization_id: uuid.UUID


@dataclass(frozen=True)
class GetOrganizationsByLocation:
    location_id: uuid.UUID
    include_non_primary: bool = False


@dataclass(frozen=True)
class GetOrganizationChart:
    organization_id: uuid.UUID
    layout_type: str | None = None


@dataclass(frozen=True)
class GetDirectReportsCount:
    organization_id: uuid.UUID
    manager_id: uuid.UUID


@dataclass(frozen=True)
class GetOrganizationRoleDistribution:
    organization_id: uuid.UUID


@dataclass(frozen=True)
class GetOrganizationLocationDistribution:
    organization_id: uuid.UUID


@dataclass(frozen=True)
class GetOrganizationSizeDistribution:
    organization_id: uuid.UUID