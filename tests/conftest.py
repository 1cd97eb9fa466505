"""Shared test fixtures for the monkey catalog tests."""

import sys
import textwrap

import pytest

from monkey_catalog.catalog.loader import load_builtin_catalog
from monkey_catalog.catalog.registry import MonkeyCatalog
from monkey_catalog.catalog.types import Monkey
from monkey_catalog.config import RetrieverConfig
from monkey_catalog.external.retriever import ExternalRetriever


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def builtin_catalog() -> MonkeyCatalog:
    """The dataset that ships with the package."""
    return load_builtin_catalog()


@pytest.fixture
def small_catalog() -> MonkeyCatalog:
    """A hand-built catalog with a duplicate name."""
    return MonkeyCatalog.of([
        Monkey(name="Baboon", species="Papio", location="Africa", population=100),
        Monkey(name="Mandrill", species="Mandrillus sphinx", location="Gabon", population=40),
        Monkey(name="baboon", species="Papio hamadryas", location="Arabia", population=7),
    ])


# =============================================================================
# Retriever Fixtures
# =============================================================================

@pytest.fixture
def stub_retriever() -> ExternalRetriever:
    """Retriever pointed at the bundled stub tool server."""
    return ExternalRetriever(config=RetrieverConfig(
        command=sys.executable,
        args=["-m", "monkey_catalog.external.stub_server"],
        timeout_seconds=30,
    ))


@pytest.fixture
def script_retriever():
    """
    Factory for retrievers whose tool server is an inline Python script.

    The script sees the request on stdin, like a real tool server.
    """
    def make(script: str, timeout_seconds: float = 30) -> ExternalRetriever:
        return ExternalRetriever(config=RetrieverConfig(
            command=sys.executable,
            args=["-c", textwrap.dedent(script)],
            timeout_seconds=timeout_seconds,
        ))
    return make
