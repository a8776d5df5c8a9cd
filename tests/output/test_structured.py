# topmark:header:start
#
#   project      : Termplate
#   file         : test_structured.py
#   file_relpath : tests/output/test_structured.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Tests for the JSON, YAML and text renderers."""

from __future__ import annotations

from typing import Any

import pytest

from termplate.output.errors import SerializationError
from termplate.output.shapes import RecordList, SingleRecord
from termplate.output.structured import render_json, render_text, render_yaml


def test_json_pretty_record_list() -> None:
    """Pretty JSON uses two-space indentation and ends with a newline."""
    out: str = render_json(RecordList.of([{"a": "1"}]), pretty=True)

    assert out == '[\n  {\n    "a": "1"\n  }\n]\n'


def test_json_compact_keeps_order_and_unicode() -> None:
    """Compact JSON has no spaces, keeps key order and does not escape non-ASCII."""
    out: str = render_json({"name": "Zoë", "age": 30}, pretty=False)

    assert out == '{"name":"Zoë","age":30}\n'


def test_json_single_record() -> None:
    """A record serializes as an object of its (stringified) pairs."""
    record = SingleRecord.from_pairs([("b", 2), ("a", 1)])

    assert render_json(record, pretty=False) == '{"b":"2","a":"1"}\n'


def test_json_unsupported_value() -> None:
    """Non-serializable values raise SerializationError with the cause chained."""
    with pytest.raises(SerializationError) as excinfo:
        render_json({"x": object()}, pretty=True)

    assert excinfo.value.format == "json"
    assert str(excinfo.value).startswith("encoding JSON:")
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_json_cyclic_value() -> None:
    """A self-referencing list cannot be encoded."""
    cyclic: list[Any] = []
    cyclic.append(cyclic)

    with pytest.raises(SerializationError):
        render_json(cyclic, pretty=False)


def test_yaml_pretty_keeps_order() -> None:
    """YAML keeps insertion order and uses block style."""
    out: str = render_yaml({"name": "Alice", "age": 30}, pretty=True)

    assert out == "name: Alice\nage: 30\n"


def test_yaml_record_list() -> None:
    """A record list is a YAML sequence of mappings."""
    out: str = render_yaml(RecordList.of([{"id": 1, "name": "Bob"}]), pretty=True)

    assert out == "- id: 1\n  name: Bob\n"


def test_yaml_unicode() -> None:
    """Non-ASCII text is written as is."""
    assert render_yaml({"name": "Zoë"}, pretty=False) == "name: Zoë\n"


def test_yaml_unsupported_value() -> None:
    """Objects without a safe representation raise SerializationError."""
    with pytest.raises(SerializationError) as excinfo:
        render_yaml({"x": object()}, pretty=True)

    assert excinfo.value.format == "yaml"


def test_text_uses_str() -> None:
    """Text is the value's string form plus a newline."""
    assert render_text(42) == "42\n"
    assert render_text("hello") == "hello\n"
    assert render_text(SingleRecord.from_pairs([("a", 1)])) == "{'a': '1'}\n"
