"""Read models built from organisation events."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from orgdomain.organization_role import OrganizationRole
from orgdomain.organization_status import OrganizationStatus
from orgdomain.organization_type import OrganizationType
from orgdomain.role_level import RoleLevel
from orgdomain.size_category import SizeCategory


@dataclass
class OrganizationView:
    """Query-side view of a single organisation."""

    organization_id: uuid.UUID
    name: str
    org_type: OrganizationType
    status: OrganizationStatus
    parent_id: uuid.UUID | None = None
    child_units: list[uuid.UUID] = field(default_factory=list)
    member_count: int = 0
    location_count: int = 0
    location_id: uuid.UUID | None = None
    primary_location_name: str | None = None
    size_category: SizeCategory = field(default_factory=SizeCategory.default)

    @staticmethod
    def calculate_size_category(member_count: int) -> SizeCategory:
        """Size bracket used by the read model for a given member count."""
        if member_count <= 10:
            return SizeCategory.SMALL
        if member_count <= 50:
            return SizeCategory.MEDIUM
        if member_count <= 200:
            return SizeCategory.LARGE
        return SizeCategory.ENTERPRISE

    def update_size_category(self) -> None:
        """Recompute the size category from the current member count."""
        self.size_category = self.calculate_size_category(self.member_count)


@dataclass
class OrganizationHierarchyView:
    """An organisation together with its descendants."""

    organization: OrganizationView
    children: list[OrganizationHierarchyView] = field(default_factory=list)


@dataclass
class MemberView:
    """Query-side view of a member of an organisation."""

    person_id: uuid.UUID
    person_name: str
    role: OrganizationRole
    joined_at: datetime
    reports_to_id: uuid.UUID | None = None
    reports_to_name: str | None = None
    direct_reports_count: int = 0
    is_active: bool = True


@dataclass
class MemberOrganizationView:
    """One organisation a person belongs to."""

    organization_id: uuid.UUID
    organization_name: str
    org_type: OrganizationType
    role: OrganizationRole
    is_primary: bool
    joined_at: datetime


@dataclass
class ReportingNode:
    """A person in the reporting tree with their direct reports."""

    person_id: uuid.UUID
    person_name: str
    role: OrganizationRole
    direct_reports: list[ReportingNode] = field(default_factory=list)


@dataclass
class ReportingStructureView:
    """Reporting tree; the roots are members without a manager."""

    organization_id: uuid.UUID
    root_members: list[ReportingNode] = field(default_factory=list)


@dataclass
class OrganizationStatistics:
    """Aggregate figures about an organisation's membership."""

    organization_id: uuid.UUID
    total_members: int
    members_by_role: dict[str, int]
    members_by_level: dict[RoleLevel, int]
    average_tenure_days: int
    location_count: int
    child_organization_count: int
    reporting_depth: int


@dataclass
class ChartNode:
    id: str
    label: str
    node_type: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ChartEdge:
    source: str
    target: str
    edge_type: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class OrganizationChartView:
    """Nodes and edges for drawing an organisation chart."""

    organization_id: uuid.UUID
    nodes: list[ChartNode]
    edges: list[ChartEdge]
    layout_type: str


@dataclass
class LocationDistribution:
    location_id: uuid.UUID
    location_name: str
    member_count: int
    percentage: float


@dataclass
class LocationDistributionView:
    organization_id: uuid.UUID
    distributions: list[LocationDistribution]
    total_locations: int


@dataclass
class SizeDistribution:
    size_category: SizeCategory
    count: int
    percentage: float


@dataclass
class SizeDistributionView:
    organization_id: uuid.UUID
    distributions: list[SizeDistribution]


@dataclass
class RoleDistribution:
    role_title: str
    role_level: RoleLevel
    count: int
    percentage: float


@dataclass
class RoleDistributionView:
    organization_id: uuid.UUID
    distributions: list[RoleDistribution]


@dataclass
class PersonReference:
    person_id: uuid.UUID
    name: str


@dataclass
class VacantPositionView:
    """An open position and who held it last."""

    position_id: uuid.UUID
    role: OrganizationRole
    vacant_since: datetime
    department: str | None = None
    reports_to: uuid.UUID | None = None
    previous_holder: PersonReference | None = None


@dataclass
class OrganizationSummary:
    """Compact organisation entry for lists."""

    organization_id: uuid.UUID
    name: str
    org_type: OrganizationType
    status: OrganizationStatus
    member_count: int