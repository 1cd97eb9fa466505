"""External retriever - fetches monkeys from a tool server child process."""

from .types import (
    ContentRecords,
    ContentText,
    ExternalMonkey,
    Failure,
    FailureKind,
    ParsedResponse,
    Success,
)
from .protocol import build_request, parse_response
from .convert import derive_species, to_monkey
from .retriever import ExternalRetriever

__all__ = [
    "ContentRecords",
    "ContentText",
    "ExternalMonkey",
    "Failure",
    "FailureKind",
    "ParsedResponse",
    "Success",
    "build_request",
    "parse_response",
    "derive_species",
    "to_monkey",
    "ExternalRetriever",
]
