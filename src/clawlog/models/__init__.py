"""Pydantic models for clawlog."""

from clawlog.models.events import (
    BaseEvent,
    ContentBlock,
    CustomEvent,
    Event,
    GenericEvent,
    MessageEvent,
    ModelChangeEvent,
    SessionEvent,
    ThinkingLevelChangeEvent,
    parse_event,
)
from clawlog.models.search import SearchMatch, SearchResult
from clawlog.models.sessions import SessionRecord

__all__ = [
    "BaseEvent",
    "ContentBlock",
    "CustomEvent",
    "Event",
    "GenericEvent",
    "MessageEvent",
    "ModelChangeEvent",
    "SearchMatch",
    "SearchResult",
    "SessionEvent",
    "SessionRecord",
    "ThinkingLevelChangeEvent",
    "parse_event",
]
