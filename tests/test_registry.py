"""Tests for the registry loader."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from clawlog.data.registry import load_registry


class TestLoadRegistry:
    def test_missing_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert load_registry(tmp_path / "sessions.json") == {}
        assert "not found" in caplog.text

    def test_corrupt_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "sessions.json"
        path.write_text("{bad-json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_registry(path) == {}
        assert "Failed to load session registry" in caplog.text

    def test_non_object_top_level(self, write_registry: Callable[[Any], Path]) -> None:
        path = write_registry([{"sessionId": "a"}])
        assert load_registry(path) == {}

    def test_loads_entries_in_order(self, write_registry: Callable[[Any], Path]) -> None:
        path = write_registry(
            {
                "agent:main:b": {"sessionId": "b", "updatedAt": 2},
                "agent:main:a": {"sessionId": "a", "updatedAt": 1},
            }
        )
        registry = load_registry(path)
        assert list(registry) == ["agent:main:b", "agent:main:a"]
        assert registry["agent:main:a"]["sessionId"] == "a"

    def test_drops_non_object_entries(self, write_registry: Callable[[Any], Path]) -> None:
        path = write_registry({"good": {"sessionId": "a"}, "bad": "oops"})
        assert list(load_registry(path)) == ["good"]
