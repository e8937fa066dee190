"""Session service: merged listing and full session detail."""

from __future__ import annotations

from typing import TYPE_CHECKING

from result import Err, Ok, Result

from clawlog.data.discovery import discover_sessions
from clawlog.data.reader import read_session_log
from clawlog.errors import SessionLogError
from clawlog.models.events import Event
from clawlog.models.sessions import SessionRecord

if TYPE_CHECKING:
    from clawlog.config import Config


class SessionService:
    """Service for session queries. Every call re-reads the filesystem."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def list_sessions(self) -> Result[list[SessionRecord], SessionLogError]:
        """List merged sessions, unsorted.

        Returns:
            Ok with the merged records or Err if the storage is unreadable.
        """
        try:
            return Ok(discover_sessions(self._config))
        except SessionLogError as exc:
            return Err(exc)

    def get_session_detail(self, session_id: str) -> Result[list[Event], SessionLogError]:
        """Get every event of one session.

        Returns:
            Ok with the ordered events, or Err carrying SessionNotFoundError,
            MalformedLogError or StorageError.
        """
        try:
            return Ok(read_session_log(self._config, session_id))
        except SessionLogError as exc:
            return Err(exc)
