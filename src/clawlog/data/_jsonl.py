"""Shared JSONL line helpers."""

from __future__ import annotations

import json
from typing import Any


def split_lines(content: str) -> list[str]:
    """Split file content into stripped, non-blank lines."""
    return [line.strip() for line in content.split("\n") if line.strip()]


def decode_line(line: str) -> Any:
    """Parse one JSONL line, rejecting the non-standard NaN/Infinity constants.

    Raises:
        ValueError: The line is not well-formed JSON.
    """
    return json.loads(line, parse_constant=_reject_constant)


def make_snippet(line: str, length: int) -> str:
    """First ``length`` characters of a raw line, with an ellipsis if truncated."""
    if len(line) <= length:
        return line
    return line[:length] + "..."


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")
