"""Validated phone number value."""

from __future__ import annotations

from dataclasses import dataclass

_ALLOWED_SYMBOLS = frozenset("+- ()")


@dataclass(frozen=True)
class PhoneNumber:
    """A phone number with at least seven digits; the text is kept as given."""

    number: str

    def __post_init__(self) -> None:
        cleaned = [c for c in self.number if c.isnumeric() or c in _ALLOWED_SYMBOLS]
        if not cleaned:
            raise ValueError("Phone number cannot be empty")
        if sum(1 for c in cleaned if c.isnumeric()) < 7:
            raise ValueError("Phone number must have at least 7 digits")

    def __str__(self) -> str:
        return self.number