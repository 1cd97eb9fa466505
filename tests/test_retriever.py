"""
Tests for the external retriever against real child processes.

Key behaviors tested:
1. The request reaches the child on stdin, followed by end-of-input
2. Both response shapes are turned into catalog records
3. Spawn failures, non-zero exits, timeouts and bad JSON degrade to empty
4. Failures are logged, never raised
"""

import json
import logging
import sys

import pytest

from monkey_catalog.config import RetrieverConfig
from monkey_catalog.external.retriever import ExternalRetriever
from monkey_catalog.external.stub_server import (
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    handle_request,
    load_stub_monkeys,
)
from monkey_catalog.external.types import Failure, FailureKind, Success

ECHO_NAME = """
    import json, sys
    request = json.loads(sys.stdin.read())
    name = request["params"]["arguments"].get("name", request["params"]["name"])
    print(json.dumps([{"Name": name, "Population": 3}]))
"""

TWO_MONKEYS = """
    import json, sys
    sys.stdin.read()
    print(json.dumps([
        {"Name": "Mandrill", "Location": "Gabon", "Details": "Colourful.", "Population": 17000, "Image": "m.jpg"},
        {"Name": "Henry", "Location": "Phoenix", "Details": "Traveller.", "Population": 1, "Image": "h.jpg"},
    ]))
"""

FAILING = """
    import sys
    sys.stdin.read()
    sys.stderr.write("image not found")
    sys.exit(3)
"""

GARBAGE = """
    import sys
    sys.stdin.read()
    print("Unable to find image locally {")
"""

HUGE_NUMBER = """
    import sys
    sys.stdin.read()
    print("[" + "1" * 5000 + "]")
"""

DEEP_NESTING = """
    import sys
    sys.stdin.read()
    print("[" * 100000 + "]" * 100000)
"""

HANGING = """
    import time
    time.sleep(30)
"""


class TestCallTool:
    def test_request_is_delivered(self, script_retriever):
        retriever = script_retriever(ECHO_NAME)
        outcome = retriever.call_tool("get_monkey", {"name": "Sebastian"})
        assert isinstance(outcome, Success)
        assert outcome.value.records[0].name == "Sebastian"

    def test_non_zero_exit_is_process_failure(self, script_retriever):
        outcome = script_retriever(FAILING).call_tool("list_monkeys")
        assert isinstance(outcome, Failure)
        assert outcome.kind is FailureKind.PROCESS
        assert "code 3" in outcome.reason
        assert "image not found" in outcome.reason

    def test_garbage_output_is_parse_failure(self, script_retriever):
        outcome = script_retriever(GARBAGE).call_tool("list_monkeys")
        assert isinstance(outcome, Failure)
        assert outcome.kind is FailureKind.PARSE

    def test_missing_executable_is_process_failure(self, tmp_path):
        retriever = ExternalRetriever(config=RetrieverConfig(
            command=str(tmp_path / "no-such-tool-server"),
            args=[],
        ))
        outcome = retriever.call_tool("list_monkeys")
        assert isinstance(outcome, Failure)
        assert outcome.kind is FailureKind.PROCESS
        assert "Failed to start" in outcome.reason

    def test_hanging_child_is_killed(self, script_retriever):
        outcome = script_retriever(HANGING, timeout_seconds=0.5).call_tool("list_monkeys")
        assert isinstance(outcome, Failure)
        assert outcome.kind is FailureKind.PROCESS
        assert "killed" in outcome.reason


class TestListMonkeys:
    def test_converts_records(self, script_retriever):
        monkeys = script_retriever(TWO_MONKEYS).list_monkeys()
        assert [m.name for m in monkeys] == ["Mandrill", "Henry"]
        assert monkeys[0].species == "Mandrillus sphinx"
        assert monkeys[0].description == "Colourful."
        assert monkeys[0].image_url == "m.jpg"
        assert monkeys[1].species == "Henry"

    def test_non_zero_exit_yields_empty_and_logs(self, script_retriever, caplog):
        with caplog.at_level(logging.WARNING):
            monkeys = script_retriever(FAILING).list_monkeys()
        assert monkeys == []
        assert "exited with code 3" in caplog.text

    def test_missing_executable_yields_empty(self, tmp_path, caplog):
        retriever = ExternalRetriever(config=RetrieverConfig(command=str(tmp_path / "missing"), args=[]))
        with caplog.at_level(logging.WARNING):
            assert retriever.list_monkeys() == []
        assert "Failed to start" in caplog.text

    def test_malformed_json_yields_empty(self, script_retriever, caplog):
        with caplog.at_level(logging.WARNING):
            assert script_retriever(GARBAGE).list_monkeys() == []
        assert "parse failure" in caplog.text

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit")
    def test_oversized_number_yields_empty(self, script_retriever, caplog):
        with caplog.at_level(logging.WARNING):
            assert script_retriever(HUGE_NUMBER).list_monkeys() == []
        assert "parse failure" in caplog.text

    def test_deep_nesting_yields_empty(self, script_retriever, caplog):
        with caplog.at_level(logging.WARNING):
            assert script_retriever(DEEP_NESTING).list_monkeys() == []
        assert "parse failure" in caplog.text

    def test_timeout_yields_empty(self, script_retriever):
        assert script_retriever(HANGING, timeout_seconds=0.5).list_monkeys() == []

    def test_each_call_spawns_fresh(self, script_retriever):
        retriever = script_retriever(TWO_MONKEYS)
        assert retriever.list_monkeys() == retriever.list_monkeys()


class TestStubServer:
    def test_list_monkeys(self, stub_retriever):
        monkeys = stub_retriever.list_monkeys()
        names = [m.name for m in monkeys]
        assert len(monkeys) == 13
        assert "Henry" in names
        assert "Mooch" in names

    def test_species_derived(self, stub_retriever):
        by_name = {m.name: m for m in stub_retriever.list_monkeys()}
        assert by_name["Mandrill"].species == "Mandrillus sphinx"
        assert by_name["Baboon"].species == "Papio"
        assert by_name["Henry"].species == "Henry"

    def test_get_monkey(self, stub_retriever):
        monkey = stub_retriever.get_monkey("mandrill")
        assert monkey is not None
        assert monkey.location == "Southern Cameroon, Gabon, and Congo"

    def test_get_unknown_monkey(self, stub_retriever):
        assert stub_retriever.get_monkey("Gorilla") is None

    @pytest.mark.parametrize("name", ["", "   "])
    def test_get_blank_name(self, stub_retriever, name):
        assert stub_retriever.get_monkey(name) is None

    def test_journey(self, stub_retriever):
        journey = stub_retriever.get_monkey_journey("Henry")
        assert journey is not None
        assert "Phoenix" in journey

    def test_unknown_tool(self, stub_retriever):
        outcome = stub_retriever.call_tool("feed_monkey")
        assert outcome.ok
        assert outcome.value.records == []


class TestStubRequestHandling:
    @pytest.fixture
    def monkeys(self):
        return load_stub_monkeys()

    @staticmethod
    def request(params):
        return json.dumps({"jsonrpc": "2.0", "id": 7, "method": "tools/call", "params": params})

    @pytest.mark.parametrize("params", [["list_monkeys"], "list_monkeys", 5])
    def test_params_not_an_object(self, monkeys, params):
        response = handle_request(self.request(params), monkeys)
        assert response["id"] == 7
        assert response["error"]["code"] == INVALID_REQUEST

    def test_arguments_not_an_object(self, monkeys):
        response = handle_request(self.request({"name": "get_monkey", "arguments": ["Henry"]}), monkeys)
        assert response["error"]["code"] == INVALID_REQUEST

    def test_unhashable_tool_name(self, monkeys):
        response = handle_request(self.request({"name": ["list_monkeys"]}), monkeys)
        assert response["error"]["code"] == METHOD_NOT_FOUND

    def test_valid_request_still_answered(self, monkeys):
        response = handle_request(self.request({"name": "get_monkey", "arguments": {"name": "Henry"}}), monkeys)
        assert "Phoenix" in response["result"]["content"][0]["text"]
