"""Tests for the short-circuiting traversal helpers."""
import pytest

from bsonjson.services.codec.traverse import traverse, traverse_fields

def test_traverse_keeps_order():
    assert traverse([3, 1, 2], lambda n: n * 10) == [30, 10, 20]

def test_traverse_stops_at_first_failure():
    """Test that later items are never visited after a failure."""
    visited = []

    def convert(item):
        visited.append(item)
        if item == "bad":
            raise ValueError(item)
        return item

    with pytest.raises(ValueError):
        traverse(["a", "bad", "c"], convert)

    assert visited == ["a", "bad"]

def test_traverse_fields_keeps_keys_and_order():
    result = traverse_fields({"b": 1, "a": 2}, str)

    assert result == {"b": "1", "a": "2"}
    assert list(result) == ["b", "a"]
