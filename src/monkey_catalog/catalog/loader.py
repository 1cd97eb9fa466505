"""Catalog loader - loads monkey datasets from YAML/JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import CatalogLoadError
from .registry import MonkeyCatalog
from .types import Monkey


logger = logging.getLogger(__name__)

BUILTIN_CATALOG_FILE = Path(__file__).parent / "monkeys.yaml"

_FIELDS = ("name", "species", "location", "population", "description", "image_url")


class CatalogLoader:
    """
    Loads monkey datasets from YAML or JSON files.

    File format:
    ```yaml
    - name: Baboon
      species: Papio
      location: Africa & Arabia
      population: 100000
      description: Baboons are some of the world's largest monkeys.
      image_url: https://example.com/Baboon.jpg
    ```
    """

    def load_file(self, path: str | Path) -> MonkeyCatalog:
        """Load a catalog from a YAML or JSON file."""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        return self.load_list(data or [])

    def load_list(self, data: list[dict[str, Any]]) -> MonkeyCatalog:
        """Load a catalog from a list of record mappings."""
        if not isinstance(data, list):
            raise CatalogLoadError(f"Catalog must be a list of monkeys, got {type(data).__name__}")

        monkeys = []
        for index, entry in enumerate(data):
            monkey = self._parse_monkey(index, entry)
            monkeys.append(monkey)
            logger.debug(f"Loaded monkey: {monkey.name}")

        logger.info(f"Loaded {len(monkeys)} monkeys")
        return MonkeyCatalog.of(monkeys)

    def _parse_monkey(self, index: int, data: Any) -> Monkey:
        """Parse a single monkey from a mapping."""
        if not isinstance(data, dict):
            raise CatalogLoadError(f"Entry {index}: expected a mapping, got {type(data).__name__}")

        unknown = set(data) - set(_FIELDS)
        if unknown:
            raise CatalogLoadError(f"Entry {index}: unknown fields {sorted(unknown)}")

        try:
            return Monkey(
                name=str(data.get("name") or ""),
                species=str(data.get("species") or ""),
                location=str(data.get("location") or ""),
                population=_population(data.get("population")),
                description=str(data.get("description") or ""),
                image_url=str(data.get("image_url") or ""),
            )
        except (TypeError, ValueError) as e:
            raise CatalogLoadError(f"Entry {index}: {e}") from e


def _population(value: Any) -> int:
    """Missing population means 0; anything but a whole number is rejected."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"population must be a whole number, got {value!r}")
    return value


def load_catalog(path: str | Path) -> MonkeyCatalog:
    """Convenience function to load a catalog from a file."""
    loader = CatalogLoader()
    return loader.load_file(path)


def load_builtin_catalog() -> MonkeyCatalog:
    """Load the dataset that ships with the package."""
    return load_catalog(BUILTIN_CATALOG_FILE)
