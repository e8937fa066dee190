"""Case-insensitive substring search across all session logs."""

from __future__ import annotations

import logging

from clawlog.config import Config
from clawlog.data._jsonl import decode_line, make_snippet, split_lines
from clawlog.data.discovery import list_log_files
from clawlog.models.events import encode_value, parse_event
from clawlog.models.search import SearchMatch, SearchResult

logger = logging.getLogger(__name__)


class SearchEngine:
    """Linear scan over every log file; nothing is indexed or cached."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def search(self, query: str) -> list[SearchResult]:
        """Search all sessions for ``query``.

        A line matches when the lower-cased compact JSON of its parsed value
        contains the lower-cased query. Unparsable lines are skipped, files
        that cannot be read are skipped, and each session stops after
        ``match_limit`` matches. Results keep directory order.

        Raises:
            StorageError: The sessions directory cannot be listed.
        """
        if not query.strip():
            return []

        needle = query.lower()
        results: list[SearchResult] = []
        for path in list_log_files(self._config.sessions_dir):
            try:
                content = path.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                logger.warning("Error reading file %s: %s", path, exc)
                continue

            matches = self._scan(content, needle)
            if matches:
                results.append(
                    SearchResult(
                        session_id=path.stem,
                        match_count=len(matches),
                        matches=matches,
                    )
                )
        return results

    def _scan(self, content: str, needle: str) -> list[SearchMatch]:
        matches: list[SearchMatch] = []
        for line_number, line in enumerate(split_lines(content), 1):
            try:
                raw = decode_line(line)
            except ValueError:
                continue
            if needle not in encode_value(raw).lower():
                continue

            matches.append(
                SearchMatch(
                    line_number=line_number,
                    event=parse_event(raw),
                    snippet=make_snippet(line, self._config.snippet_length),
                )
            )
            if len(matches) >= self._config.match_limit:
                break
        return matches
