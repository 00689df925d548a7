"""Flat view models for organisation listings."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class OrganizationView:
    """Summary of an organisation for display."""

    id: uuid.UUID
    name: str
    category: str
    size: int
    member_count: int
    headquarters_location: uuid.UUID | None = None
    founded_date: date | None = None
    average_tenure_days: float | None = None
    primary_location_name: str | None = None


@dataclass
class MemberView:
    """Summary of one membership for display."""

    person_id: uuid.UUID
    organization_id: uuid.UUID
    person_name: str
    role: str
    joined_date: datetime
    tenure_days: int