"""
Wire protocol for the tool server.

Requests are single-line JSON-RPC 2.0 ``tools/call`` messages. Responses come
in one of two shapes:

    [{"Name": "Baboon", ...}, ...]                       # bare array
    {"result": {"content": [{"text": "<json or plain text>"}, ...]}}   # envelope

Item-level problems drop the item and keep going; only a payload that is not
JSON at all, or is JSON of an unsupported shape, fails the whole response.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from pydantic import ValidationError

from .types import (
    ContentItem,
    ContentRecords,
    ContentText,
    ExternalMonkey,
    Failure,
    FailureKind,
    Outcome,
    ParsedResponse,
    Success,
)

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
REQUEST_ID = 1
TOOLS_CALL = "tools/call"


def build_request(command: str, arguments: dict[str, Any] | None = None) -> str:
    """
    Build a newline-terminated ``tools/call`` request.

    Args:
        command: Tool name, e.g. ``list_monkeys`` or ``get_monkey``
        arguments: Tool arguments, e.g. ``{"name": "Baboon"}``
    """
    request = {
        "jsonrpc": JSONRPC_VERSION,
        "id": REQUEST_ID,
        "method": TOOLS_CALL,
        "params": {
            "name": command,
            "arguments": arguments or {},
        },
    }
    return json.dumps(request, separators=(",", ":")) + "\n"


def parse_response(payload: str) -> Outcome[ParsedResponse]:
    """Parse a tool server response, trying the bare array shape first."""
    try:
        document = json.loads(payload)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; oversized ints and deep nesting raise the others
        return Failure(FailureKind.PARSE, f"Malformed response JSON: {e}")

    if isinstance(document, list):
        return Success(ParsedResponse(records=validate_records(document)))

    if isinstance(document, dict):
        return Success(_parse_envelope(document))

    return Failure(
        FailureKind.PARSE,
        f"Unsupported response shape: expected array or object, got {type(document).__name__}",
    )


def decode_content_item(text: str) -> ContentItem:
    """
    Decode the ``text`` of one content item.

    JSON objects (or arrays of objects) are record candidates; anything else,
    including JSON scalars, is free-form text.
    """
    try:
        decoded = json.loads(text)
    except (ValueError, RecursionError):
        return ContentText(text)

    if isinstance(decoded, dict):
        return ContentRecords((decoded,))
    if isinstance(decoded, list) and decoded and all(isinstance(d, dict) for d in decoded):
        return ContentRecords(tuple(decoded))
    return ContentText(text)


def validate_records(candidates: Iterable[Any]) -> list[ExternalMonkey]:
    """Validate record candidates, dropping the ones that don't hold up."""
    records = []
    for index, candidate in enumerate(candidates):
        record = _validate_record(index, candidate)
        if record is not None:
            records.append(record)
    return records


def _validate_record(index: int, candidate: Any) -> ExternalMonkey | None:
    if not isinstance(candidate, dict):
        logger.warning(f"Skipping item {index}: expected an object, got {type(candidate).__name__}")
        return None

    try:
        record = ExternalMonkey.model_validate(candidate)
    except ValidationError as e:
        logger.warning(f"Skipping item {index}: {e.error_count()} invalid field(s): {_summarize(e)}")
        return None

    if not record.name.strip():
        logger.warning(f"Skipping item {index}: no Name")
        return None

    return record


def _parse_envelope(document: dict[str, Any]) -> ParsedResponse:
    error = document.get("error")
    if error:
        message = error.get("message", error) if isinstance(error, dict) else error
        logger.warning(f"Tool server reported an error: {message}")
        return ParsedResponse()

    result = document.get("result")
    content = result.get("content") if isinstance(result, dict) else None
    if not isinstance(content, list):
        logger.debug("Response has no result.content array")
        return ParsedResponse()

    candidates: list[dict[str, Any]] = []
    messages: list[str] = []

    for item in content:
        text = item.get("text") if isinstance(item, dict) else None
        if not isinstance(text, str) or not text:
            continue

        decoded = decode_content_item(text)
        if isinstance(decoded, ContentRecords):
            candidates.extend(decoded.payloads)
        else:
            logger.info(f"Tool server: {decoded.text}")
            messages.append(decoded.text)

    return ParsedResponse(records=validate_records(candidates), messages=messages)


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
    )
