"""Catalog registry - immutable, ordered collection of monkeys."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..errors import EmptyCatalogError
from .types import Monkey

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MonkeyCatalog:
    """
    Read-only catalog of monkeys.

    Built once at startup and shared by reference. Order is the
    declaration order of the source dataset and never changes.

    Supports:
    - Listing every record
    - Case-insensitive lookup by name (first match wins)
    - Uniform random pick
    - Merging with an external batch into a new catalog
    """
    _monkeys: tuple[Monkey, ...] = ()

    @classmethod
    def of(cls, monkeys: Iterable[Monkey]) -> MonkeyCatalog:
        """Create a catalog from any iterable of records."""
        return cls(tuple(monkeys))

    def list_all(self) -> tuple[Monkey, ...]:
        """All records in declaration order."""
        return self._monkeys

    def find_by_name(self, name: str | None) -> Monkey | None:
        """
        Find the first monkey with the given name, ignoring case.

        Blank input is treated as not found without searching.
        """
        if name is None or not name.strip():
            return None

        wanted = name.strip()
        for monkey in self._monkeys:
            if monkey.matches(wanted):
                return monkey
        return None

    def random_pick(self, rng: random.Random | None = None) -> Monkey:
        """
        Pick one monkey uniformly at random.

        Args:
            rng: Optional random source, mostly for reproducible tests

        Raises:
            EmptyCatalogError: If the catalog has no records
        """
        if not self._monkeys:
            raise EmptyCatalogError("Cannot pick a random monkey from an empty catalog")
        chooser = rng if rng is not None else random
        return chooser.choice(self._monkeys)

    def merged_with(self, others: Iterable[Monkey]) -> MonkeyCatalog:
        """
        Return a new catalog with extra records appended.

        Records whose name already exists in this catalog are skipped, so
        local entries always win over external ones.
        """
        known = {m.name.casefold() for m in self._monkeys}
        extra = []
        for monkey in others:
            key = monkey.name.casefold()
            if key in known:
                logger.debug(f"Skipping duplicate monkey from merge: {monkey.name}")
                continue
            known.add(key)
            extra.append(monkey)
        return MonkeyCatalog(self._monkeys + tuple(extra))

    def names(self) -> list[str]:
        """Names of all records, in order."""
        return [m.name for m in self._monkeys]

    def __len__(self) -> int:
        return len(self._monkeys)

    def __iter__(self) -> Iterator[Monkey]:
        return iter(self._monkeys)
