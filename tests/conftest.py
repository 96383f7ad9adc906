"""
Pytest configuration and shared fixtures.
"""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

INPUT_DIR = Path(__file__).parent / "input"

# 2023-05-21T16:00:00.000-07:00
PACIFIC = timezone(timedelta(hours=-7))
FAKE_NOW_MS = int(datetime(2023, 5, 21, 16, 0, tzinfo=PACIFIC).timestamp() * 1000)


def input_file(name: str) -> str:
    """Path of a JSON fixture under tests/input."""
    return str(INPUT_DIR / name)


def load_input(name: str):
    return json.loads((INPUT_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def fake_now_ms() -> int:
    return FAKE_NOW_MS


@pytest.fixture
def pacific():
    """Fixed -07:00 zone so timestamps render as 16:00:00.000 at the start."""
    return PACIFIC
