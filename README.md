# orgdomain

A library for modelling organizations: kinds of organizational unit, their
lifecycle status, roles and permissions, member assignments with reporting
lines, and the read models and queries that answer questions about them.

## What it provides

Value objects:

- `orgdomain.role_level.RoleLevel`: seniority from `EXECUTIVE` down to
  `INTERN`. Levels are ordered, with more senior levels comparing as smaller
  (`RoleLevel.EXECUTIVE < RoleLevel.MANAGER`), and offer `numeric_level()`,
  `can_manage()`, `is_management()`, `is_individual_contributor()` and
  `typical_reporting_span()`.
- `orgdomain.organization_type.OrganizationType`: internal units (company,
  division, department, team, project) and external organizations, with
  `is_internal()`, `is_external()`, `hierarchical_level()` and `can_parent()`.
- `orgdomain.organization_status.OrganizationStatus`: lifecycle status with
  `valid_transitions()` and `can_transition_to()`.
- `orgdomain.size_category.SizeCategory`: size brackets by head count, with
  `from_employee_count()` and typical ranges for employees, budget,
  departments and management layers.
- `orgdomain.phone_number.PhoneNumber` and `orgdomain.address.Address`:
  validated values that raise `ValueError` on bad input.
- `orgdomain.organization_role`: `Permission`, `CustomPermission`,
  `OrganizationRole` (with ready-made `ceo()`, `cto()`, `vp_engineering()`,
  `engineering_manager()` and `software_engineer()` roles) and
  `OrganizationMember`.

Queries and read models:

- `orgdomain.queries`: frozen query objects such as `GetOrganizationById`,
  `GetOrganizationHierarchy`, `GetOrganizationMembers`,
  `GetReportingStructure`, `SearchOrganizations`,
  `GetOrganizationStatistics` and `GetOrganizationChart`.
- `orgdomain.projections`: read models such as `OrganizationView`,
  `MemberView`, `OrganizationHierarchyView`, `ReportingStructureView`,
  `OrganizationStatistics` and `OrganizationChartView`.
- `orgdomain.views`: flat display models `OrganizationView` and `MemberView`.

Storage and query handling (all asynchronous, all in memory):

- `orgdomain.read_store.InMemoryReadModelStore`, implementing
  `ReadModelStore`: organization views, their members, and each person's
  memberships. Values are copied on the way in and out.
- `orgdomain.component_store.InMemoryComponentStore`, implementing
  `ComponentStore`: holds any object with `id`, `organization_id` and `data`
  attributes, looked up by id and by the type of its `data`. Missing
  components on update or delete, and type mismatches on lookup, raise
  `ComponentStoreError`.
- `orgdomain.event_store.InMemoryEventStore`, implementing `EventStore`: an
  append-only list of events.
- `orgdomain.query_handler.OrganizationQueryHandler`: answers the queries
  above from a `ReadModelStore`. Queries that need an organization that is
  not there raise `orgdomain.read_store.OrganizationNotFoundError`.

## Installation

```
pip install .
```

## Example

```python
import asyncio
import uuid

from orgdomain.organization_status import OrganizationStatus
from orgdomain.organization_type import OrganizationType
from orgdomain.projections import OrganizationView
from orgdomain.queries import SearchOrganizations
from orgdomain.query_handler import OrganizationQueryHandler
from orgdomain.read_store import InMemoryReadModelStore
from orgdomain.size_category import SizeCategory


async def main():
    store = InMemoryReadModelStore()
    await store.update_organization(
        OrganizationView(
            organization_id=uuid.uuid4(),
            name="Example Corp",
            org_type=OrganizationType.COMPANY,
            status=OrganizationStatus.ACTIVE,
            size_category=SizeCategory.SMALL,
        )
    )
    handler = OrganizationQueryHandler(store)
    found = await handler.search_organizations(
        SearchOrganizations(query="example", limit=10)
    )
    print([org.name for org in found])


asyncio.run(main())
```

Value objects check their input and raise `ValueError` when it is invalid:

```python
from orgdomain.phone_number import PhoneNumber

PhoneNumber("123")  # ValueError: Phone number must have at least 7 digits
```

Organization status transitions follow fixed rules:

```python
from orgdomain.organization_status import OrganizationStatus

OrganizationStatus.PENDING.can_transition_to(OrganizationStatus.ACTIVE)   # True
OrganizationStatus.ARCHIVED.can_transition_to(OrganizationStatus.ACTIVE)  # False
```

## What it does not do

- There is no write side: no commands, no organization aggregate and nothing
  that turns events into read models. Read models are filled by calling the
  store's `update_organization`, `update_member` and `remove_member` directly.
- Member and location names are not looked up anywhere; a `MemberView`
  carries whatever name it was given.
- Storage is in memory only; nothing is persisted between runs.
- The component store does not define component types; callers supply their
  own objects.
- There is no command-line tool or server.

## Running the tests

```
pip install .[test]
pytest
```