"""Session-level models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SessionRecord(BaseModel):
    """One session in the merged listing, from the registry or synthesized from its log."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    session_id: str = Field(alias="sessionId")
    updated_at: int | None = Field(default=None, alias="updatedAt")
    chat_type: str | None = Field(default=None, alias="chatType")
    channel: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    model: str | None = None
    provider: str | None = None
    total_tokens: int | None = Field(default=None, alias="totalTokens")
    input_tokens: int | None = Field(default=None, alias="inputTokens")
    output_tokens: int | None = Field(default=None, alias="outputTokens")
    origin: Any = None
    from_file: bool = Field(default=False, alias="fromFile")
