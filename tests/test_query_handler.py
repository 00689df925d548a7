import uuid
from datetime import datetime, timedelta, timezone

import pytest

from orgdomain.organization_role import OrganizationRole
from orgdomain.organization_status import OrganizationStatus
from orgdomain.organization_type import OrganizationType
from orgdomain.projections import MemberView, OrganizationView
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
from orgdomain.query_handler import OrganizationQueryHandler
from orgdomain.read_store import InMemoryReadModelStore, OrganizationNotFoundError
from orgdomain.role_level import RoleLevel


def _now():
    return datetime.now(timezone.utc)


def _org(name, org_type=OrganizationType.COMPANY, status=OrganizationStatus.ACTIVE, **kwargs):
    return OrganizationView(
        organization_id=kwargs.pop("organization_id", uuid.uuid4()),
        name=name,
        org_type=org_type,
        status=status,
        **kwargs,
    )


def _member(name, role, reports_to=None, joined_at=None, is_active=True, person_id=None):
    return MemberView(
        person_id=person_id or uuid.uuid4(),
        person_name=name,
        role=role,
        joined_at=joined_at or _now(),
        reports_to_id=reports_to,
        is_active=is_active,
    )


@pytest.fixture
def store():
    return InMemoryReadModelStore()


@pytest.fixture
def handler(store):
    return OrganizationQueryHandler(store)


@pytest.mark.asyncio
async def test_get_organization_by_id(store, handler):
    org = _org("Test Corp")
    await store.update_organization(org)
    result = await handler.get_organization_by_id(GetOrganizationById(org.organization_id))
    assert result is not None
    assert result.name == "Test Corp"


@pytest.mark.asyncio
async def test_get_organization_by_id_missing(handler):
    assert await handler.get_organization_by_id(GetOrganizationById(uuid.uuid4())) is None


@pytest.mark.asyncio
async def test_get_organization_hierarchy(store, handler):
    parent = _org("Parent Corp")
    await store.update_organization(parent)
    result = await handler.get_organization_hierarchy(
        GetOrganizationHierarchy(parent.organization_id, max_depth=3)
    )
    assert result.organization.name == "Parent Corp"
    assert result.children == []


@pytest.mark.asyncio
async def test_hierarchy_with_children_and_depth(store, handler):
    team = _org("Team", OrganizationType.TEAM)
    division = _org("Division", OrganizationType.DIVISION, child_units=[team.organization_id])
    company = _org("Company", child_units=[division.organization_id])
    for org in (team, division, company):
        await store.update_organization(org)

    full = await handler.get_organization_hierarchy(
        GetOrganizationHierarchy(company.organization_id)
    )
    assert [c.organization.name for c in full.children] == ["Division"]
    assert [c.organization.name for c in full.children[0].children] == ["Team"]

    shallow = await handler.get_organization_hierarchy(
        GetOrganizationHierarchy(company.organization_id, max_depth=1)
    )
    assert shallow.children[0].children == []


@pytest.mark.asyncio
async def test_hierarchy_unknown_organization_raises(handler):
    missing = uuid.uuid4()
    with pytest.raises(OrganizationNotFoundError) as info:
        await handler.get_organization_hierarchy(GetOrganizationHierarchy(missing))
    assert info.value.organization_id == missing


@pytest.mark.asyncio
async def test_search_organizations(store, handler):
    for i in range(5):
        org_type = OrganizationType.COMPANY if i % 2 == 0 else OrganizationType.DIVISION
        await store.update_organization(_org(f"Test Corp {i}", org_type, member_count=i))

    results = await handler.search_organizations(SearchOrganizations(query="Corp", limit=10))
    assert len(results) == 5

    type_results = await handler.search_organizations(
        SearchOrganizations(query="", limit=10, org_type_filter=OrganizationType.COMPANY)
    )
    assert len(type_results) == 3


@pytest.mark.asyncio
async def test_search_is_case_insensitive_and_limited(store, handler):
    for i in range(4):
        await store.update_organization(_org(f"Acme {i}"))
    await store.update_organization(_org("Other", status=OrganizationStatus.DISSOLVED))

    results = await handler.search_organizations(SearchOrganizations(query="ACME", limit=2))
    assert len(results) == 2

    dissolved = await handler.search_organizations(
        SearchOrganizations(query="", limit=10, status_filter=OrganizationStatus.DISSOLVED)
    )
    assert [org.name for org in dissolved] == ["Other"]


@pytest.mark.asyncio
async def test_organization_statistics(store, handler):
    org = _org("Stats Corp")
    await store.update_organization(org)
    for i in range(10):
        role = (
            OrganizationRole.software_engineer()
            if i < 5
            else OrganizationRole.engineering_manager()
        )
        await store.update_member(org.organization_id, _member(f"P{i}", role))

    stats = await handler.get_organization_statistics(
        GetOrganizationStatistics(org.organization_id)
    )
    assert stats.total_members == 10
    assert stats.members_by_role.get("Software Engineer") == 5
    assert stats.members_by_role.get("Engineering Manager") == 5
    assert stats.members_by_level[RoleLevel.MID] == 5
    assert stats.members_by_level[RoleLevel.MANAGER] == 5
    assert stats.average_tenure_days == 0
    assert stats.reporting_depth == 0


@pytest.mark.asyncio
async def test_statistics_tenure_depth_and_counts(store, handler):
    child = uuid.uuid4()
    org = _org("Tenure Corp", location_count=2, child_units=[child])
    await store.update_organization(org)
    boss = _member("Boss", OrganizationRole.ceo(), joined_at=_now() - timedelta(days=10, hours=1))
    worker = _member(
        "Worker",
        OrganizationRole.software_engineer(),
        reports_to=boss.person_id,
        joined_at=_now() - timedelta(days=20, hours=1),
    )
    await store.update_member(org.organization_id, boss)
    await store.update_member(org.organization_id, worker)

    stats = await handler.get_organization_statistics(
        GetOrganizationStatistics(org.organization_id)
    )
    assert stats.average_tenure_days == 15
    assert stats.reporting_depth == 1
    assert stats.location_count == 2
    assert stats.child_organization_count == 1


@pytest.mark.asyncio
async def test_statistics_unknown_organization_raises(handler):
    with pytest.raises(OrganizationNotFoundError):
        await handler.get_organization_statistics(GetOrganizationStatistics(uuid.uuid4()))


@pytest.mark.asyncio
async def test_reporting_structure(store, handler):
    org_id = uuid.uuid4()
    ceo = _member("CEO", OrganizationRole.ceo())
    vp = _member("VP Engineering", OrganizationRole.vp_engineering(), reports_to=ceo.person_id)
    manager = _member(
        "Engineering Manager", OrganizationRole.engineering_manager(), reports_to=vp.person_id
    )
    engineer = _member(
        "Software Engineer", OrganizationRole.software_engineer(), reports_to=manager.person_id
    )
    for member in (ceo, vp, manager, engineer):
        await store.update_member(org_id, member)

    structure = await handler.get_reporting_structure(GetReportingStructure(org_id))
    assert len(structure.root_members) == 1
    assert structure.root_members[0].person_name == "CEO"
    assert len(structure.root_members[0].direct_reports) == 1
    assert len(structure.root_members[0].direct_reports[0].direct_reports) == 1

    limited = await handler.get_reporting_structure(GetReportingStructure(org_id, max_depth=1))
    assert limited.root_members[0].direct_reports == []


@pytest.mark.asyncio
async def test_organization_chart(store, handler):
    org_id = uuid.uuid4()
    manager = _member("Manager", OrganizationRole.engineering_manager())
    engineer = _member(
        "Engineer", OrganizationRole.software_engineer(), reports_to=manager.person_id
    )
    await store.update_member(org_id, manager)
    await store.update_member(org_id, engineer)

    chart = await handler.get_organization_chart(
        GetOrganizationChart(org_id, layout_type="hierarchical")
    )
    assert len(chart.nodes) == 2
    assert len(chart.edges) == 1
    assert chart.edges[0].edge_type == "reports_to"
    assert chart.edges[0].source == str(manager.person_id)
    assert chart.edges[0].target == str(engineer.person_id)
    assert chart.nodes[0].label == "Manager\nEngineering Manager"


@pytest.mark.asyncio
async def test_chart_default_layout(handler):
    chart = await handler.get_organization_chart(GetOrganizationChart(uuid.uuid4()))
    assert chart.layout_type == "hierarchical"
    assert chart.nodes == []


@pytest.mark.asyncio
async def test_member_filters(store, handler):
    org_id = uuid.uuid4()
    await store.update_member(org_id, _member("A", OrganizationRole.software_engineer()))
    await store.update_member(
        org_id, _member("B", OrganizationRole.software_engineer(), is_active=False)
    )
    await store.update_member(org_id, _member("C", OrganizationRole.engineering_manager()))

    active = await handler.get_organization_members(GetOrganizationMembers(org_id))
    assert sorted(m.person_name for m in active) == ["A", "C"]

    by_code = await handler.get_organization_members(
        GetOrganizationMembers(org_id, role_filter="SW_ENG", include_inactive=True)
    )
    assert sorted(m.person_name for m in by_code) == ["A", "B"]

    by_title = await handler.get_organization_members(
        GetOrganizationMembers(org_id, role_filter="Engineering Manager")
    )
    assert [m.person_name for m in by_title] == ["C"]


@pytest.mark.asyncio
async def test_by_type_and_status(store, handler):
    await store.update_organization(_org("Co"))
    await store.update_organization(_org("Team", OrganizationType.TEAM))
    await store.update_organization(
        _org("Old", OrganizationType.TEAM, status=OrganizationStatus.ARCHIVED)
    )

    teams = await handler.get_organizations_by_type(GetOrganizationsByType(OrganizationType.TEAM))
    assert sorted(o.name for o in teams) == ["Old", "Team"]

    archived = await handler.get_organizations_by_status(
        GetOrganizationsByStatus(OrganizationStatus.ARCHIVED)
    )
    assert [o.name for o in archived] == ["Old"]


@pytest.mark.asyncio
async def test_member_organizations(store, handler):
    org = _org("Home")
    await store.update_organization(org)
    member = _member("Lead", OrganizationRole.engineering_manager())
    await store.update_member(org.organization_id, member)

    memberships = await handler.get_member_organizations(GetMemberOrganizations(member.person_id))
    assert [m.organization_name for m in memberships] == ["Home"]
    assert memberships[0].is_primary is True


@pytest.mark.asyncio
async def test_default_handler_uses_empty_store():
    handler = OrganizationQueryHandler()
    results = await handler.search_organizations(SearchOrganizations(query="", limit=5))
    assert results == []