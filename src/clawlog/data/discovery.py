"""Discover sessions from the registry and the log directory, and merge them."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

from clawlog.config import Config
from clawlog.data._jsonl import decode_line
from clawlog.data.registry import load_registry
from clawlog.errors import StorageError
from clawlog.models.events import parse_event, to_epoch_ms
from clawlog.models.sessions import SessionRecord

logger = logging.getLogger(__name__)

_UNKNOWN = "unknown"
_LOG_SUFFIX = ".jsonl"


def discover_sessions(config: Config) -> list[SessionRecord]:
    """Merge registry sessions with sessions synthesized from untracked log files.

    Registry-derived records come first in registry order, followed by
    synthesized records in directory order. When both sources describe the
    same session id, the registry record wins. No sorting is applied.

    Raises:
        StorageError: The sessions directory cannot be listed.
    """
    sessions = registry_records(load_registry(config.registry_path))
    claimed = {session.session_id for session in sessions}

    for path in list_log_files(config.sessions_dir):
        if path.stem in claimed:
            continue
        record = synthesize_record(path, display_id_length=config.display_id_length)
        if record is None:
            continue
        sessions.append(record)
        claimed.add(record.session_id)

    return sessions


def list_log_files(sessions_dir: Path) -> list[Path]:
    """List session log files in directory order (sorted by name).

    Raises:
        StorageError: The directory cannot be listed.
    """
    try:
        entries = sorted(sessions_dir.iterdir())
    except OSError as exc:
        raise StorageError(f"Cannot list sessions directory {sessions_dir}: {exc}") from exc
    return [path for path in entries if path.name.endswith(_LOG_SUFFIX) and path.is_file()]


def registry_records(registry: dict[str, dict[str, Any]]) -> list[SessionRecord]:
    """Convert registry entries to records, keeping the first entry per session id."""
    records: list[SessionRecord] = []
    seen: set[str] = set()
    for key, entry in registry.items():
        session_id = entry.get("sessionId")
        if not isinstance(session_id, str) or not session_id:
            logger.warning("Registry entry %r has no sessionId, skipping", key)
            continue
        if session_id in seen:
            logger.warning("Registry entry %r repeats session %s, keeping the first", key, session_id)
            continue
        seen.add(session_id)
        records.append(_record_from_registry(key, session_id, entry))
    return records


def synthesize_record(path: Path, *, display_id_length: int = 8) -> SessionRecord | None:
    """Build a fallback record from a log file's first line and mtime.

    Returns None (after logging) when the first line is missing, unreadable or
    not valid JSON, so one bad file never aborts the scan.
    """
    session_id = path.stem
    try:
        with open(path, encoding="utf-8", errors="replace") as file:
            first_line = file.readline().strip()
        mtime_ms = int(path.stat().st_mtime * 1000)
    except OSError as exc:
        logger.warning("Failed to read %s: %s", path, exc)
        return None

    if not first_line:
        logger.warning("Skipping %s: first line is empty", path)
        return None
    try:
        first_event = parse_event(decode_line(first_line))
    except ValueError as exc:
        logger.warning("Error parsing first line of %s: %s", path, exc)
        return None

    updated_at = first_event.timestamp_ms()
    if updated_at is None:
        updated_at = mtime_ms

    return SessionRecord(
        key=f"file:{session_id}",
        session_id=session_id,
        updated_at=updated_at,
        chat_type=_UNKNOWN,
        channel=_UNKNOWN,
        display_name=f"Session {session_id[:display_id_length]}...",
        from_file=True,
    )


def _record_from_registry(key: str, session_id: str, entry: dict[str, Any]) -> SessionRecord:
    return SessionRecord(
        key=key,
        session_id=session_id,
        updated_at=to_epoch_ms(entry.get("updatedAt")),
        chat_type=_optional_str(entry.get("chatType")),
        channel=_optional_str(entry.get("channel")) or _optional_str(entry.get("lastChannel")),
        display_name=_optional_str(entry.get("displayName")),
        model=_optional_str(entry.get("model")),
        provider=_optional_str(entry.get("modelProvider")),
        total_tokens=_optional_int(entry.get("totalTokens")),
        input_tokens=_optional_int(entry.get("inputTokens")),
        output_tokens=_optional_int(entry.get("outputTokens")),
        origin=entry.get("origin"),
        from_file=False,
    )


def _optional_str(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _optional_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None
