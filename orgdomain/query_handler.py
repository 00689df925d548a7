"""Answers queries against the organisation read models."""

from __future__ import annotations

import uuid
from collections import Counter
from datetime import datetime, timezone

from orgdomain.projections import (
    ChartEdge,
    ChartNode,
    MemberOrganizationView,
    MemberView,
    OrganizationChartView,
    OrganizationHierarchyView,
    OrganizationStatistics,
    OrganizationView,
    ReportingNode,
    ReportingStructureView,
)
from orgdomain.queries import (
    GetMemberOrganizations,
    GetOrganizationById,
    GetOrganizationChart,
    GetOrganizationHierarchy,
    GetOrganizationMembers,
    GetOrganizationsByStatus,
    GetOrganizationsByType,
    GetOrganizationStatistics,
    GetReportingStructure,
    SearchOrganizations,
)
from orgdomain.read_store import (
    InMemoryReadModelStore,
    OrganizationNotFoundError,
    ReadModelStore,
)

_DEFAULT_LAYOUT = "hierarchical"


def _within_depth(max_depth: int | None, depth: int) -> bool:
    return max_depth is None or depth < max_depth


def _tenure_days(joined_at: datetime) -> int:
    now = datetime.now(timezone.utc) if joined_at.tzinfo is not None else datetime.now()
    return max((now - joined_at).days, 0)


class OrganizationQueryHandler:
    """Handles organisation queries using a read-model store."""

    def __init__(self, read_store: ReadModelStore | None = None) -> None:
        self.read_store = read_store if read_store is not None else InMemoryReadModelStore()

    async def get_organization_by_id(
        self, query: GetOrganizationById
    ) -> OrganizationView | None:
        return await self.read_store.get_organization(query.organization_id)

    async def _require_organization(self, organization_id: uuid.UUID) -> OrganizationView:
        organization = await self.read_store.get_organization(organization_id)
        if organization is None:
            raise OrganizationNotFoundError(organization_id)
        return organization

    async def get_organization_hierarchy(
        self, query: GetOrganizationHierarchy
    ) -> OrganizationHierarchyView:
        """Return the organisation and its descendants down to ``max_depth`` levels."""
        organization = await self._require_organization(query.organization_id)
        children = await self._build_hierarchy(organization, query.max_depth, 0)
        return OrganizationHierarchyView(organization=organization, children=children)

    async def _build_hierarchy(
        self, parent: OrganizationView, max_depth: int | None, depth: int
    ) -> list[OrganizationHierarchyView]:
        if not _within_depth(max_depth, depth):
            return []
        children = []
        for child_id in parent.child_units:
            child = await self.read_store.get_organization(child_id)
            if child is None:
                continue
            grandchildren = await self._build_hierarchy(child, max_depth, depth + 1)
            children.append(OrganizationHierarchyView(organization=child, children=grandchildren))
        return children

    async def get_organization_members(
        self, query: GetOrganizationMembers
    ) -> list[MemberView]:
        """Members, optionally filtered by role title or code, active only by default."""
        members = await self.read_store.get_organization_members(query.organization_id)
        role_filter = query.role_filter
        return [
            member
            for member in members
            if (role_filter is None or role_filter in (member.role.title, member.role.role_code))
            and (query.include_inactive or member.is_active)
        ]

    async def get_organizations_by_type(
        self, query: GetOrganizationsByType
    ) -> list[OrganizationView]:
        organizations = await self.read_store.get_all_organizations()
        return [org for org in organizations if org.org_type == query.org_type]

    async def get_organizations_by_status(
        self, query: GetOrganizationsByStatus
    ) -> list[OrganizationView]:
        organizations = await self.read_store.get_all_organizations()
        return [org for org in organizations if org.status == query.status]

    async def get_member_organizations(
        self, query: GetMemberOrganizations
    ) -> list[MemberOrganizationView]:
        return await self.read_store.get_person_organizations(query.person_id)

    async def get_reporting_structure(
        self, query: GetReportingStructure
    ) -> ReportingStructureView:
        """Reporting tree rooted at members without a manager."""
        members = await self.read_store.get_organization_members(query.organization_id)
        roots = self._build_reporting_tree(members, None, query.max_depth, 0)
        return ReportingStructureView(organization_id=query.organization_id, root_members=roots)

    def _build_reporting_tree(
        self,
        members: list[MemberView],
        manager_id: uuid.UUID | None,
        max_depth: int | None,
        depth: int,
    ) -> list[ReportingNode]:
        if not _within_depth(max_depth, depth):
            return []
        return [
            ReportingNode(
                person_id=member.person_id,
                person_name=member.person_name,
                role=member.role,
                direct_reports=self._build_reporting_tree(
                    members, member.person_id, max_depth, depth + 1
                ),
            )
            for member in members
            if member.reports_to_id == manager_id
        ]

    async def search_organizations(
        self, query: SearchOrganizations
    ) -> list[OrganizationView]:
        """Case-insensitive name search with optional filters, at most ``limit`` results."""
        organizations = await self.read_store.get_all_organizations()
        needle = query.query.lower()
        matches = (
            org
            for org in organizations
            if (not needle or needle in org.name.lower())
            and (query.org_type_filter is None or org.org_type == query.org_type_filter)
            and (query.status_filter is None or org.status == query.status_filter)
        )
        results = []
        for org in matches:
            if len(results) >= query.limit:
                break
            results.append(org)
        return results

    async def get_organization_statistics(
        self, query: GetOrganizationStatistics
    ) -> OrganizationStatistics:
        members = await self.read_store.get_organization_members(query.organization_id)
        organization = await self._require_organization(query.organization_id)

        members_by_role = Counter(member.role.title for member in members)
        members_by_level = Counter(member.role.level for member in members)
        total_tenure = sum(_tenure_days(member.joined_at) for member in members)
        average_tenure = total_tenure // len(members) if members else 0

        return OrganizationStatistics(
            organization_id=query.organization_id,
            total_members=len(members),
            members_by_role=dict(members_by_role),
            members_by_level=dict(members_by_level),
            average_tenure_days=average_tenure,
            location_count=organization.location_count,
            child_organization_count=len(organization.child_units),
            reporting_depth=self._max_reporting_depth(members),
        )

    def _max_reporting_depth(self, members: list[MemberView]) -> int:
        return max(
            (self._member_depth(member.person_id, members, 0) for member in members),
            default=0,
        )

    def _member_depth(
        self, person_id: uuid.UUID, members: list[MemberView], depth: int
    ) -> int:
        return max(
            (
                self._member_depth(report.person_id, members, depth + 1)
                for report in members
                if report.reports_to_id == person_id
            ),
            default=depth,
        )

    async def get_organization_chart(
        self, query: GetOrganizationChart
    ) -> OrganizationChartView:
        """One node per member and one ``reports_to`` edge per manager link."""
        members = await self.read_store.get_organization_members(query.organization_id)
        nodes = [
            ChartNode(
                id=str(member.person_id),
                label=f"{member.person_name}\n{member.role.title}",
                node_type="member",
            )
            for member in members
        ]
        edges = [
            ChartEdge(
                source=str(member.reports_to_id),
                target=str(member.person_id),
                edge_type="reports_to",
            )
            for member in members
            if member.reports_to_id is not None
        ]
        return OrganizationChartView(
            organization_id=query.organization_id,
            nodes=nodes,
            edges=edges,
            layout_type=query.layout_type if query.layout_type is not None else _DEFAULT_LAYOUT,
        )