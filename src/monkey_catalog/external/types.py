"""Types for the external retriever - wire records and call outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class ExternalMonkey(BaseModel):
    """A monkey as the tool server sends it (PascalCase field names)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str = Field("", alias="Name")
    location: str = Field("", alias="Location")
    details: str = Field("", alias="Details")
    population: int = Field(0, ge=0, alias="Population")
    image: str = Field("", alias="Image")

    @field_validator("name", "location", "details", "image", mode="before")
    @classmethod
    def _null_string_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("population", mode="before")
    @classmethod
    def _null_population_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


@dataclass(frozen=True, slots=True)
class ContentRecords:
    """A content item whose text decoded to one or more record objects."""
    payloads: tuple[dict[str, Any], ...]


@dataclass(frozen=True, slots=True)
class ContentText:
    """A content item carrying free-form text rather than records."""
    text: str


ContentItem = Union[ContentRecords, ContentText]


@dataclass(frozen=True, slots=True)
class ParsedResponse:
    """Everything recovered from one tool server response."""
    records: list[ExternalMonkey] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)  # plain-text content items


class FailureKind(str, Enum):
    """Why an external call produced no usable response."""
    PROCESS = "process"  # spawn failure, non-zero exit, timeout
    PARSE = "parse"      # malformed or unsupported top-level payload


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    kind: FailureKind
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.kind.value} failure: {self.reason}"


Outcome = Union[Success[T], Failure]
