# topmark:header:start
#
#   project      : Termplate
#   file         : structured.py
#   file_relpath : src/termplate/output/structured.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Structured renderers: JSON, YAML and plain text.

These serialize the *original* value rather than a canonical table. Shape
variants (`SingleRecord`, `RecordList`, `Grid`) are unwrapped to their plain
data first; any other value is handed to the encoder untouched.

All functions return the complete document text so that a failing encoder never
leaves partial output behind.
"""

from __future__ import annotations

import json

import yaml

from termplate.config.logging import TermplateLogger, get_logger
from termplate.output.errors import SerializationError
from termplate.output.shapes import to_plain_data

logger: TermplateLogger = get_logger(__name__)

JSON_INDENT: int = 2
YAML_INDENT: int = 2


def render_json(value: object, *, pretty: bool) -> str:
    """Encode ``value`` as JSON followed by a newline.

    Args:
        value (object): Value to encode.
        pretty (bool): Two-space indentation when set, otherwise compact
            single-line encoding without spaces after separators.

    Returns:
        str: The JSON document.

    Raises:
        SerializationError: If the value holds unsupported types or cycles.
    """
    data = to_plain_data(value)
    try:
        if pretty:
            text = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
        else:
            text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("JSON encoding failed for %s: %s", type(data).__name__, exc)
        raise SerializationError("json", exc) from exc
    return text + "\n"


def render_yaml(value: object, *, pretty: bool) -> str:
    """Encode ``value`` as a YAML document using ``yaml.safe_dump``.

    Keys keep their insertion order. With ``pretty`` the output is forced to
    block style with two-space indentation; otherwise PyYAML defaults apply.

    Raises:
        SerializationError: If PyYAML cannot represent the value.
    """
    data = to_plain_data(value)
    try:
        if pretty:
            text = yaml.safe_dump(
                data,
                default_flow_style=False,
                indent=YAML_INDENT,
                sort_keys=False,
                allow_unicode=True,
            )
        else:
            text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    except (yaml.YAMLError, RecursionError) as exc:
        logger.debug("YAML encoding failed for %s: %s", type(data).__name__, exc)
        raise SerializationError("yaml", exc) from exc
    return text


def render_text(value: object) -> str:
    """Return the value's default string representation plus a newline."""
    return f"{to_plain_data(value)}\n"
