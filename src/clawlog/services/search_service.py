"""Search service wrapping the substring search engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from result import Err, Ok, Result

from clawlog.errors import SessionLogError
from clawlog.models.search import SearchResult

if TYPE_CHECKING:
    from clawlog.data.search import SearchEngine


class SearchService:
    """Service for cross-session search."""

    def __init__(self, search_engine: SearchEngine) -> None:
        self._engine = search_engine

    def search(self, query: str) -> Result[list[SearchResult], SessionLogError]:
        """Search every session log. A blank query is an empty success."""
        if not query.strip():
            return Ok([])
        try:
            return Ok(self._engine.search(query))
        except SessionLogError as exc:
            return Err(exc)
