"""Display helpers for listings and event views."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from clawlog.models.events import (
    NOT_AVAILABLE,
    CustomEvent,
    Event,
    MessageEvent,
    ModelChangeEvent,
    SessionEvent,
    ThinkingLevelChangeEvent,
)
from clawlog.models.search import SearchResult
from clawlog.models.sessions import SessionRecord


def sort_sessions(
    sessions: Iterable[SessionRecord], *, newest_first: bool = False
) -> list[SessionRecord]:
    """Sort by ``updated_at`` (missing values count as 0), oldest first by default."""
    return sorted(sessions, key=lambda s: s.updated_at or 0, reverse=newest_first)


def filter_events(events: Iterable[Event], query: str) -> list[Event]:
    """Keep events whose JSON text contains ``query``, ignoring case."""
    needle = query.strip().lower()
    if not needle:
        return list(events)
    return [event for event in events if needle in event.to_json().lower()]


def total_matches(results: Iterable[SearchResult]) -> int:
    return sum(result.match_count for result in results)


def event_label(event: Event) -> str:
    """Short title for an event card."""
    match event:
        case MessageEvent():
            return event.role
        case SessionEvent():
            return "Session Start"
        case ModelChangeEvent():
            return "Model Change"
        case ThinkingLevelChangeEvent():
            return "Thinking Level"
        case CustomEvent():
            return event.custom_type
        case _:
            return event.type or "unknown"


def event_summary(event: Event) -> str:
    """Multi-line body text for an event card."""
    match event:
        case MessageEvent() if event.is_tool_result:
            body = event.result if isinstance(event.result, str) else _pretty(event.result)
            return f"Tool Result: {event.tool_name}\n{body}"
        case MessageEvent():
            return "\n".join(_message_parts(event))
        case SessionEvent():
            return f"ID: {event.id or NOT_AVAILABLE}\nWorking Directory: {event.cwd}"
        case ModelChangeEvent():
            return f"Provider: {event.provider}\nModel: {event.model_id}"
        case ThinkingLevelChangeEvent():
            return f"Level: {event.level}"
        case CustomEvent():
            return _pretty(event.data)
        case _:
            return _pretty(event.raw)


def format_epoch_ms(value: int | None) -> str:
    """Local date-time text for an epoch-millisecond timestamp."""
    if value is None:
        return ""
    try:
        return datetime.fromtimestamp(value / 1000).astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return str(value)


def _message_parts(event: MessageEvent) -> list[str]:
    parts: list[str] = []
    for block in event.content:
        match block.type:
            case "text":
                parts.append(block.text)
            case "thinking":
                parts.append(f"Thinking: {block.text}")
            case "toolCall":
                parts.append(f"Tool: {block.name}\nArguments: {_pretty(block.arguments)}")
    return parts


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)
