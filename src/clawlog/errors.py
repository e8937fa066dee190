"""Error taxonomy for session log access."""

from __future__ import annotations

from pathlib import Path


class SessionLogError(Exception):
    """Base class for failures reading session storage."""


class SessionNotFoundError(SessionLogError):
    """The requested session id has no corresponding log file."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id


class MalformedLogError(SessionLogError):
    """A log line could not be parsed during a full read."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        super().__init__(f"Invalid JSON at {path}:{line_number}: {reason}")
        self.path = path
        self.line_number = line_number


class StorageError(SessionLogError):
    """Underlying storage could not be read."""
