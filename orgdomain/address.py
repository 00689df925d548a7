"""Postal address value."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """A physical or mailing address; line 1, city and country are required."""

    line1: str
    line2: str | None
    city: str
    state_province: str | None
    postal_code: str | None
    country: str

    def __post_init__(self) -> None:
        if not self.line1.strip():
            raise ValueError("Address line 1 cannot be empty")
        if not self.city.strip():
            raise ValueError("City cannot be empty")
        if not self.country.strip():
            raise ValueError("Country cannot be empty")

    def format_single_line(self) -> str:
        """Join the present parts with commas."""
        parts = (
            self.line1,
            self.line2,
            self.city,
            self.state_province,
            self.postal_code,
            self.country,
        )
        return ", ".join(part for part in parts if part is not None)

    def __str__(self) -> str:
        return self.format_single_line()