"""
Stub tool server for the monkey catalog.

Speaks the same one-request protocol as the real tool server: reads a single
JSON-RPC ``tools/call`` line from stdin, writes one response envelope to
stdout and exits. Serves a canned dataset, so the CLI can be used without
docker by pointing the retriever at it:

Usage:
    MONKEY_MCP_COMMAND=python \\
    MONKEY_MCP_ARGS="-m monkey_catalog.external.stub_server" \\
        monkey-catalog external

    echo '{"jsonrpc":"2.0","id":1,"method":"tools/call","params":{"name":"list_monkeys","arguments":{}}}' \\
        | python -m monkey_catalog.external.stub_server
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

import yaml

logger = logging.getLogger("monkey-stub-server")

STUB_DATA_FILE = Path(__file__).parent / "stub_monkeys.yaml"

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601

ToolHandler = Callable[[list[dict[str, Any]], dict[str, Any]], list[str]]

_TOOLS: dict[str, ToolHandler] = {}


def tool(name: str) -> Callable[[ToolHandler], ToolHandler]:
    """Register a tool handler under ``name``."""
    def decorator(func: ToolHandler) -> ToolHandler:
        _TOOLS[name] = func
        return func
    return decorator


def load_stub_monkeys(path: Path = STUB_DATA_FILE) -> list[dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or []


def _find(monkeys: list[dict[str, Any]], name: str) -> dict[str, Any] | None:
    wanted = name.strip().casefold()
    for monkey in monkeys:
        if str(monkey.get("Name", "")).casefold() == wanted:
            return monkey
    return None


# ===================================================================
# TOOLS
# ===================================================================

@tool("list_monkeys")
def list_monkeys(monkeys: list[dict[str, Any]], arguments: dict[str, Any]) -> list[str]:
    return [json.dumps(m) for m in monkeys]


@tool("get_monkey")
def get_monkey(monkeys: list[dict[str, Any]], arguments: dict[str, Any]) -> list[str]:
    name = str(arguments.get("name", ""))
    monkey = _find(monkeys, name)
    if monkey is None:
        return [f"No monkey named '{name}' was found."]
    return [json.dumps(monkey)]


@tool("get_monkey_journey")
def get_monkey_journey(monkeys: list[dict[str, Any]], arguments: dict[str, Any]) -> list[str]:
    name = str(arguments.get("name", ""))
    monkey = _find(monkeys, name)
    if monkey is None:
        return [f"No journey found for '{name}'."]
    return [
        f"{monkey['Name']} set out from {monkey.get('Location', 'parts unknown')}.",
        f"Along the way it met {monkey.get('Population', 0):,} of its kind.",
    ]


# ===================================================================
# REQUEST HANDLING
# ===================================================================

def _error(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def handle_request(line: str, monkeys: list[dict[str, Any]]) -> dict[str, Any]:
    """Turn one request line into one response object."""
    try:
        request = json.loads(line)
    except (ValueError, RecursionError) as e:
        return _error(None, PARSE_ERROR, f"Parse error: {e}")

    if not isinstance(request, dict) or request.get("method") != "tools/call":
        request_id = request.get("id") if isinstance(request, dict) else None
        return _error(request_id, INVALID_REQUEST, "Only tools/call is supported")

    request_id = request.get("id")
    params = request.get("params") or {}
    if not isinstance(params, dict):
        return _error(request_id, INVALID_REQUEST, "params must be an object")
    arguments = params.get("arguments") or {}
    if not isinstance(arguments, dict):
        return _error(request_id, INVALID_REQUEST, "arguments must be an object")
    name = params.get("name")
    handler = _TOOLS.get(name) if isinstance(name, str) else None
    if handler is None:
        return _error(request_id, METHOD_NOT_FOUND, f"Unknown tool: {name}")

    texts = handler(monkeys, arguments)
    logger.info(f"{name}: {len(texts)} content item(s)")
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "result": {"content": [{"type": "text", "text": t} for t in texts]},
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Stub tool server for the monkey catalog")
    parser.add_argument("--data", default=str(STUB_DATA_FILE), help="YAML file of monkeys to serve")
    args = parser.parse_args()

    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(stream=sys.stderr, level=logging.INFO, format="%(name)s: %(message)s")

    monkeys = load_stub_monkeys(Path(args.data))
    line = sys.stdin.readline()
    response = handle_request(line, monkeys)
    sys.stdout.write(json.dumps(response) + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
