"""Protocol definitions for services."""

from __future__ import annotations

from typing import Protocol

from result import Result

from clawlog.errors import SessionLogError
from clawlog.models.events import Event
from clawlog.models.search import SearchResult
from clawlog.models.sessions import SessionRecord


class SessionServiceProtocol(Protocol):
    """Interface for session operations."""

    def list_sessions(self) -> Result[list[SessionRecord], SessionLogError]: ...

    def get_session_detail(self, session_id: str) -> Result[list[Event], SessionLogError]: ...


class SearchServiceProtocol(Protocol):
    """Interface for search operations."""

    def search(self, query: str) -> Result[list[SearchResult], SessionLogError]: ...
