"""Load the optional session registry (``sessions.json``)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_registry(path: Path) -> dict[str, dict[str, Any]]:
    """Load registry entries keyed by registry key.

    The registry is optional: a missing, unreadable or corrupt file yields an
    empty mapping and a warning, never an exception.
    """
    if not path.is_file():
        logger.warning("Session registry not found at %s, scanning log files only", path)
        return {}
    try:
        with open(path, encoding="utf-8") as file:
            data = json.load(file)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Failed to load session registry %s: %s", path, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Session registry %s is not a JSON object, ignoring it", path)
        return {}

    entries: dict[str, dict[str, Any]] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            entries[key] = value
        else:
            logger.warning("Ignoring registry entry %r in %s: not an object", key, path)
    return entries
