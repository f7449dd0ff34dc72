"""Tests for per-file analysis."""

from __future__ import annotations

import json

import pytest

from backspace_detective.batch import analyze_per_file
from backspace_detective.errors import DecodeError

HUMAN_STATS = {
    "total_keystrokes": 100,
    "backspace_count": 10,
    "delete_count": 0,
    "characters_typed": 90,
    "edit_duration_ms": 60000,
}

AI_STATS = {
    "total_keystrokes": 1000,
    "backspace_count": 5,
    "delete_count": 2,
    "characters_typed": 993,
    "edit_duration_ms": 60000,
}


def test_each_file_analyzed() -> None:
    payload = json.dumps({"src/app.py": HUMAN_STATS, "src/generated.py": AI_STATS})
    results = analyze_per_file(payload)
    assert list(results) == ["src/app.py", "src/generated.py"]
    assert results["src/app.py"]["prediction"] == "Human"
    assert results["src/generated.py"]["prediction"] == "AI"


def test_bad_entry_does_not_affect_others() -> None:
    payload = json.dumps({"good.py": HUMAN_STATS, "bad.py": {"backspace_count": 1}})
    results = analyze_per_file(payload)
    assert results["good.py"]["prediction"] == "Human"
    assert results["bad.py"] == {"error": "Failed to parse editing stats", "is_error": True}


def test_empty_mapping() -> None:
    assert analyze_per_file("{}") == {}


@pytest.mark.parametrize("payload", ["not json", "[]", json.dumps([HUMAN_STATS]), "3"])
def test_non_object_payload_raises(payload: str) -> None:
    with pytest.raises(DecodeError):
        analyze_per_file(payload)
