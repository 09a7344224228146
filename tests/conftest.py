"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from lintpolicy.errors import InvalidRangeError
from lintpolicy.ranges import Comparator, ComparatorSet


class FakeRangeParser:
    """RangeParser serving canned comparator sets."""

    def __init__(self, table: dict[str, list[ComparatorSet]]):
        self.table = table
        self.calls: list[str] = []

    def parse(self, range_str: str) -> list[ComparatorSet]:
        self.calls.append(range_str)
        if range_str not in self.table:
            raise InvalidRangeError(range_str)
        return self.table[range_str]

    def satisfies(self, version: str, range_str: str) -> bool:
        return any(
            all(c.operator == "" and c.version == version for c in comparators)
            for comparators in self.parse(range_str)
        )


@pytest.fixture
def fake_parser() -> FakeRangeParser:
    return FakeRangeParser(
        {
            "1.0.0": [(Comparator("", "1.0.0"),)],
            "caret-ish": [(Comparator(">=", "1.0.0"), Comparator("<", "2.0.0"))],
            "three": [(Comparator(">=", "1.0.0"), Comparator("<", "2.0.0"), Comparator("<", "1.5.0"))],
        }
    )


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document under tmp_path and return its path."""

    def _write(relpath: str, data: Any) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write
