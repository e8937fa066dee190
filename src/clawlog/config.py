"""Configuration for clawlog."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    sessions_dir: Path = field(
        default_factory=lambda: Path.home() / ".openclaw" / "agents" / "main" / "sessions"
    )
    registry_name: str = "sessions.json"
    port: int = 3000
    host: str = "127.0.0.1"
    match_limit: int = 10
    snippet_length: int = 200
    display_id_length: int = 8

    @property
    def registry_path(self) -> Path:
        return self.sessions_dir / self.registry_name

    def session_path(self, session_id: str) -> Path:
        return self.sessions_dir / f"{session_id}.jsonl"
