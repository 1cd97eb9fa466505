"""Catalog types - the monkey record."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Monkey:
    """
    One monkey entry in the catalog.

    Records are immutable. Identity is the name, compared case-insensitively;
    the catalog does not enforce uniqueness.
    """
    name: str
    species: str = ""
    location: str = ""
    population: int = 0  # Estimated individuals in the wild
    description: str = ""
    image_url: str = ""  # URL-shaped, not validated

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Monkey name must not be empty")
        if self.population < 0:
            raise ValueError(f"Population of {self.name} must not be negative: {self.population}")

    def matches(self, name: str) -> bool:
        """Check whether this record has the given name, ignoring case."""
        return self.name.casefold() == name.casefold()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
