"""Shared fixtures for clawlog tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from clawlog.config import Config

SAMPLE_EVENTS: list[dict[str, Any]] = [
    {
        "type": "session",
        "id": "sess-001",
        "timestamp": "2026-02-20T10:00:00.000Z",
        "cwd": "/Users/test/project",
    },
    {
        "type": "model_change",
        "id": "e1",
        "timestamp": "2026-02-20T10:00:01.000Z",
        "provider": "anthropic",
        "modelId": "claude-sonnet",
    },
    {
        "type": "message",
        "id": "e2",
        "timestamp": "2026-02-20T10:00:02.000Z",
        "message": {"role": "user", "content": [{"type": "text", "text": "Please fix the bug"}]},
    },
    {
        "type": "message",
        "id": "e3",
        "timestamp": "2026-02-20T10:00:03.000Z",
        "message": {
            "role": "assistant",
            "content": [
                {"type": "thinking", "thinking": "Let me look at the code"},
                {"type": "toolCall", "name": "read", "arguments": {"path": "main.py"}},
            ],
        },
    },
    {
        "type": "message",
        "id": "e4",
        "timestamp": "2026-02-20T10:00:04.000Z",
        "toolName": "read",
        "message": {"role": "toolResult", "content": [{"type": "text", "text": "print(1)"}]},
    },
]

WriteJsonl = Callable[[str, list[Any]], Path]


@pytest.fixture
def sessions_dir(tmp_path: Path) -> Path:
    """Empty sessions directory."""
    path = tmp_path / "sessions"
    path.mkdir()
    return path


@pytest.fixture
def config(sessions_dir: Path) -> Config:
    """Config pointing at the temporary sessions directory."""
    return Config(sessions_dir=sessions_dir)


@pytest.fixture
def write_jsonl(sessions_dir: Path) -> WriteJsonl:
    """Write ``<session_id>.jsonl``; dict/list items are JSON-encoded, strings written verbatim."""

    def _write(session_id: str, lines: list[Any]) -> Path:
        path = sessions_dir / f"{session_id}.jsonl"
        text_lines = [line if isinstance(line, str) else json.dumps(line) for line in lines]
        path.write_text("\n".join(text_lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_registry(sessions_dir: Path) -> Callable[[Any], Path]:
    """Write ``sessions.json`` with the given payload."""

    def _write(payload: Any) -> Path:
        path = sessions_dir / "sessions.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_session(write_jsonl: WriteJsonl) -> Path:
    """A well-formed session log covering every event variant."""
    return write_jsonl("sess-001", SAMPLE_EVENTS)

