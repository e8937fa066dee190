"""Event taxonomy for session log lines.

Every line of a session log is one event, tagged by its ``type`` field. The
known tags form a closed set of variants; anything else falls back to
:class:`GenericEvent`. Each variant keeps the raw parsed JSON value so that
serializing an event reproduces exactly what was on disk.
"""

from __future__ import annotations

import json
import math
from datetime import UTC, datetime, timedelta
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_serializer

NOT_AVAILABLE = "N/A"
UNKNOWN = "unknown"
CUSTOM_EVENT_DEFAULT = "Custom Event"
TOOL_RESULT_ROLE = "toolResult"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class ContentBlock(BaseModel):
    """A single content block of a message (text, thinking, toolCall)."""

    model_config = ConfigDict(frozen=True)

    type: str
    text: str = ""
    name: str = ""
    arguments: Any = None


class BaseEvent(BaseModel):
    """Fields shared by every event variant."""

    model_config = ConfigDict(frozen=True)

    type: str = ""
    id: str = ""
    timestamp: Any = None
    raw: Any = Field(default=None, repr=False)

    @model_serializer
    def _serialize_raw(self) -> Any:
        return self.raw

    def to_json(self) -> str:
        """Compact JSON text of the raw event, as used for substring matching."""
        return encode_value(self.raw)

    def timestamp_ms(self) -> int | None:
        return to_epoch_ms(self.timestamp)


class MessageEvent(BaseEvent):
    """A conversation message; tool results are messages with role ``toolResult``."""

    type: Literal["message"] = "message"
    role: str = UNKNOWN
    content: tuple[ContentBlock, ...] = ()
    tool_name: str = UNKNOWN
    result: Any = None

    @property
    def is_tool_result(self) -> bool:
        return self.role == TOOL_RESULT_ROLE


class SessionEvent(BaseEvent):
    """Session start marker."""

    type: Literal["session"] = "session"
    cwd: str = NOT_AVAILABLE


class ModelChangeEvent(BaseEvent):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    type: Literal["model_change"] = "model_change"
    provider: str = NOT_AVAILABLE
    model_id: str = NOT_AVAILABLE


class ThinkingLevelChangeEvent(BaseEvent):
    type: Literal["thinking_level_change"] = "thinking_level_change"
    level: str = NOT_AVAILABLE


class CustomEvent(BaseEvent):
    """Extension event with an opaque payload."""

    type: Literal["custom"] = "custom"
    custom_type: str = CUSTOM_EVENT_DEFAULT
    data: Any = None


class GenericEvent(BaseEvent):
    """Fallback for unrecognized tags and for lines that are not JSON objects."""


Event = (
    MessageEvent
    | SessionEvent
    | ModelChangeEvent
    | ThinkingLevelChangeEvent
    | CustomEvent
    | GenericEvent
)


def parse_event(raw: Any) -> Event:
    """Build the typed event for one parsed log line."""
    if not isinstance(raw, dict):
        return GenericEvent(raw=raw)

    tag = _as_str(raw.get("type"))
    common: dict[str, Any] = {
        "id": _as_str(raw.get("id")),
        "timestamp": raw.get("timestamp"),
        "raw": raw,
    }

    match tag:
        case "message":
            return _parse_message(raw, common)
        case "session":
            return SessionEvent(cwd=_as_str(raw.get("cwd")) or NOT_AVAILABLE, **common)
        case "model_change":
            return ModelChangeEvent(
                provider=_as_str(raw.get("provider")) or NOT_AVAILABLE,
                model_id=_as_str(raw.get("modelId")) or NOT_AVAILABLE,
                **common,
            )
        case "thinking_level_change":
            return ThinkingLevelChangeEvent(
                level=_as_str(raw.get("thinkingLevel")) or NOT_AVAILABLE,
                **common,
            )
        case "custom":
            return CustomEvent(
                custom_type=_as_str(raw.get("customType")) or CUSTOM_EVENT_DEFAULT,
                data=raw.get("data"),
                **common,
            )
        case _:
            return GenericEvent(type=tag, **common)


def _parse_message(raw: dict[str, Any], common: dict[str, Any]) -> MessageEvent:
    msg = raw.get("message")
    msg_dict = msg if isinstance(msg, dict) else {}
    role = _as_str(msg_dict.get("role")) or UNKNOWN
    raw_content = msg_dict.get("content", [])

    if role == TOOL_RESULT_ROLE:
        tool_name = _as_str(raw.get("toolName")) or _as_str(msg_dict.get("toolName"))
        return MessageEvent(
            role=role,
            tool_name=tool_name or UNKNOWN,
            result=raw_content,
            **common,
        )

    return MessageEvent(role=role, content=_parse_content(raw_content), **common)


def _parse_content(raw_content: object) -> tuple[ContentBlock, ...]:
    if isinstance(raw_content, str):
        return (ContentBlock(type="text", text=raw_content),)
    if not isinstance(raw_content, list):
        return ()

    blocks: list[ContentBlock] = []
    for item in raw_content:
        if not isinstance(item, dict):
            continue
        block_type = _as_str(item.get("type")) or UNKNOWN
        match block_type:
            case "text":
                blocks.append(ContentBlock(type="text", text=_as_str(item.get("text"))))
            case "thinking":
                blocks.append(ContentBlock(type="thinking", text=_as_str(item.get("thinking"))))
            case "toolCall":
                blocks.append(
                    ContentBlock(
                        type="toolCall",
                        name=_as_str(item.get("name")) or UNKNOWN,
                        arguments=item.get("arguments"),
                    )
                )
            case _:
                blocks.append(ContentBlock(type=block_type, text=_as_str(item.get("text"))))
    return tuple(blocks)


def to_epoch_ms(value: object) -> int | None:
    """Convert an ISO-8601 string or epoch-millisecond number to epoch ms.

    Naive ISO timestamps are read as UTC. Returns None for anything missing
    or unparsable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return (parsed - _EPOCH) // timedelta(milliseconds=1)
    return None


def encode_value(value: Any) -> str:
    """Compact JSON serialization with non-ASCII characters kept as-is."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _as_str(value: object) -> str:
    return value if isinstance(value, str) else ""
