"""Tests for display helpers."""

from __future__ import annotations

from clawlog.models.events import parse_event
from clawlog.models.search import SearchResult
from clawlog.models.sessions import SessionRecord
from clawlog.presentation import (
    event_label,
    event_summary,
    filter_events,
    format_epoch_ms,
    sort_sessions,
    total_matches,
)


def _record(session_id: str, updated_at: int | None) -> SessionRecord:
    return SessionRecord(key=session_id, session_id=session_id, updated_at=updated_at)


class TestSortSessions:
    def test_oldest_first_by_default(self) -> None:
        records = [_record("b", 20), _record("a", 10), _record("c", None)]
        assert [r.session_id for r in sort_sessions(records)] == ["c", "a", "b"]

    def test_newest_first(self) -> None:
        records = [_record("b", 20), _record("a", 10), _record("c", 30)]
        assert [r.session_id for r in sort_sessions(records, newest_first=True)] == ["c", "b", "a"]

    def test_stable_for_ties(self) -> None:
        records = [_record("x", 5), _record("y", 5)]
        assert [r.session_id for r in sort_sessions(records, newest_first=True)] == ["x", "y"]


class TestFilterEvents:
    def test_filters_case_insensitively(self) -> None:
        events = [
            parse_event({"type": "custom", "data": "Apple"}),
            parse_event({"type": "custom", "data": "pear"}),
        ]
        assert filter_events(events, " APPLE ") == [events[0]]

    def test_blank_query_keeps_everything(self) -> None:
        events = [parse_event({"type": "session"})]
        assert filter_events(events, "  ") == events


class TestEventText:
    def test_labels(self) -> None:
        assert event_label(parse_event({"type": "session"})) == "Session Start"
        assert event_label(parse_event({"type": "model_change"})) == "Model Change"
        assert event_label(parse_event({"type": "thinking_level_change"})) == "Thinking Level"
        assert event_label(parse_event({"type": "custom"})) == "Custom Event"
        assert event_label(parse_event({"type": "message", "message": {"role": "user"}})) == "user"
        assert event_label(parse_event({"type": "compaction"})) == "compaction"
        assert event_label(parse_event(42)) == "unknown"

    def test_session_summary_defaults(self) -> None:
        summary = event_summary(parse_event({"type": "session"}))
        assert summary == "ID: N/A\nWorking Directory: N/A"

    def test_model_change_summary(self) -> None:
        summary = event_summary(parse_event({"type": "model_change", "modelId": "m1"}))
        assert summary == "Provider: N/A\nModel: m1"

    def test_message_summary(self) -> None:
        event = parse_event(
            {
                "type": "message",
                "message": {
                    "role": "assistant",
                    "content": [
                        {"type": "thinking", "thinking": "plan"},
                        {"type": "text", "text": "done"},
                        {"type": "toolCall", "name": "bash", "arguments": {"cmd": "ls"}},
                    ],
                },
            }
        )
        summary = event_summary(event)
        assert "Thinking: plan" in summary
        assert "done" in summary
        assert "Tool: bash" in summary
        assert '"cmd": "ls"' in summary

    def test_tool_result_summary(self) -> None:
        event = parse_event(
            {"type": "message", "toolName": "bash", "message": {"role": "toolResult", "content": "out"}}
        )
        assert event_summary(event) == "Tool Result: bash\nout"

    def test_generic_summary_is_raw_json(self) -> None:
        assert '"type": "other"' in event_summary(parse_event({"type": "other"}))


class TestMisc:
    def test_total_matches(self) -> None:
        results = [
            SearchResult(session_id="a", match_count=3),
            SearchResult(session_id="b", match_count=10),
        ]
        assert total_matches(results) == 13

    def test_format_epoch_ms(self) -> None:
        assert format_epoch_ms(None) == ""
        assert format_epoch_ms(0) != ""
