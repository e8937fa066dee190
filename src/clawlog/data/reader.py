"""Strict full read of one session log."""

from __future__ import annotations

import logging

from clawlog.config import Config
from clawlog.data._jsonl import decode_line, split_lines
from clawlog.errors import MalformedLogError, SessionNotFoundError, StorageError
from clawlog.models.events import Event, parse_event

logger = logging.getLogger(__name__)


def read_session_log(config: Config, session_id: str) -> list[Event]:
    """Read every event of a session, in file order.

    Blank lines are dropped. Unlike discovery and search, a single unparsable
    line fails the whole read.

    Raises:
        SessionNotFoundError: No log file exists for ``session_id``.
        MalformedLogError: A non-blank line is not valid JSON.
        StorageError: The log file exists but cannot be read.
    """
    if not _is_plain_name(session_id):
        raise SessionNotFoundError(session_id)

    path = config.session_path(session_id)
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise SessionNotFoundError(session_id) from exc
    except OSError as exc:
        raise StorageError(f"Failed to read session log {path}: {exc}") from exc

    events: list[Event] = []
    for line_number, line in enumerate(split_lines(content), 1):
        try:
            raw = decode_line(line)
        except ValueError as exc:
            logger.warning("Invalid JSON at %s:%d", path, line_number)
            raise MalformedLogError(path, line_number, str(exc)) from exc
        events.append(parse_event(raw))
    return events


def _is_plain_name(session_id: str) -> bool:
    """Reject ids that would resolve outside the sessions directory."""
    if not session_id or session_id in {".", ".."}:
        return False
    return not any(sep in session_id for sep in ("/", "\\", "\x00"))
