"""Search models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from clawlog.models.events import Event


class SearchMatch(BaseModel):
    """One matching log line with a preview snippet of the raw text."""

    model_config = ConfigDict(populate_by_name=True)

    line_number: int = Field(alias="lineNumber")
    event: Event
    snippet: str = ""


class SearchResult(BaseModel):
    """Matches found in one session, capped per session."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    match_count: int = Field(default=0, alias="matchCount")
    matches: list[SearchMatch] = Field(default_factory=list)
