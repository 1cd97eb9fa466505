"""Catalog system - the read-only set of built-in monkeys."""

from .types import Monkey
from .registry import MonkeyCatalog
from .loader import load_catalog, load_builtin_catalog

__all__ = [
    "Monkey",
    "MonkeyCatalog",
    "load_catalog",
    "load_builtin_catalog",
]
