"""External retriever - asks the tool server for monkeys."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..catalog.types import Monkey
from ..config import RetrieverConfig
from .convert import to_monkey
from .protocol import build_request, parse_response
from .runner import run_tool_process
from .types import Failure, Outcome, ParsedResponse

logger = logging.getLogger(__name__)

LIST_MONKEYS = "list_monkeys"
GET_MONKEY = "get_monkey"
GET_MONKEY_JOURNEY = "get_monkey_journey"


@dataclass
class ExternalRetriever:
    """
    Fetches monkeys from a tool server launched as a child process.

    Every call spawns a fresh process and sends exactly one request; nothing
    is cached between calls. The public lookups never raise: failures are
    logged and turned into an empty list or None.

    Usage:
        retriever = ExternalRetriever()
        monkeys = retriever.list_monkeys()

        # Or against a different server
        retriever = ExternalRetriever(config=RetrieverConfig(
            command="python",
            args=["-m", "monkey_catalog.external.stub_server"],
        ))
    """
    config: RetrieverConfig = field(default_factory=RetrieverConfig)

    def call_tool(self, command: str, arguments: dict[str, Any] | None = None) -> Outcome[ParsedResponse]:
        """
        Run one tool call and parse the response.

        Use this when the caller needs to tell a failed call apart from an
        empty result.
        """
        request = build_request(command, arguments)
        timeout = self.config.timeout_seconds or None

        outcome = run_tool_process(self.config.argv, request, timeout)
        if isinstance(outcome, Failure):
            return outcome
        return parse_response(outcome.value)

    def list_monkeys(self) -> list[Monkey]:
        """All monkeys the tool server knows about, or [] on failure."""
        outcome = self.call_tool(LIST_MONKEYS)
        if isinstance(outcome, Failure):
            logger.warning(f"Error retrieving monkeys from tool server: {outcome}")
            return []

        monkeys = [to_monkey(r) for r in outcome.value.records]
        logger.info(f"Retrieved {len(monkeys)} monkeys from tool server")
        return monkeys

    def get_monkey(self, name: str) -> Monkey | None:
        """Look up one monkey by name on the tool server."""
        if not name or not name.strip():
            return None

        outcome = self.call_tool(GET_MONKEY, {"name": name.strip()})
        if isinstance(outcome, Failure):
            logger.warning(f"Error retrieving monkey '{name}' from tool server: {outcome}")
            return None

        records = outcome.value.records
        return to_monkey(records[0]) if records else None

    def get_monkey_journey(self, name: str) -> str | None:
        """Free-text journey description for a monkey, if the server has one."""
        if not name or not name.strip():
            return None

        outcome = self.call_tool(GET_MONKEY_JOURNEY, {"name": name.strip()})
        if isinstance(outcome, Failure):
            logger.warning(f"Error retrieving journey for '{name}' from tool server: {outcome}")
            return None

        messages = outcome.value.messages
        return "\n".join(messages) if messages else None
