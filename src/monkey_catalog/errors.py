"""Exception hierarchy for the monkey catalog."""

from __future__ import annotations


class MonkeyCatalogError(Exception):
    """Base exception for monkey catalog errors."""
    pass


class CatalogLoadError(MonkeyCatalogError):
    """A catalog definition file could not be turned into records."""
    pass


class EmptyCatalogError(MonkeyCatalogError):
    """An operation that needs at least one record ran on an empty catalog."""
    pass
