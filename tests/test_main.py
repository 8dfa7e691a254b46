"""Tests for the built-in dispatch."""

from jrpc_core.main import default_dispatch
from jrpc_core.services.extractor import JsonRpcExtractor


def dispatch(raw):
    handle = JsonRpcExtractor.from_raw(raw)
    assert isinstance(handle, JsonRpcExtractor)
    return default_dispatch(handle).to_wire()


def test_add():
    wire = dispatch('{"id":1,"jsonrpc":"2.0","method":"add","params":[2,3]}')
    assert wire == {"jsonrpc": "2.0", "id": 1, "result": 5}


def test_add_negative_id():
    wire = dispatch({"id": -4, "jsonrpc": "2.0", "method": "add", "params": [-2, 2]})
    assert wire == {"jsonrpc": "2.0", "id": -4, "result": 0}


def test_unknown_method():
    wire = dispatch({"id": 2, "jsonrpc": "2.0", "method": "sub", "params": [2, 3]})
    assert wire["error"]["code"] == -32601
    assert wire["error"]["message"] == "Method `sub` not found"
