"""Unit tests for announcement sinks and timestamp rendering."""

import io
from datetime import timezone

from graphwalk.config import resolve_timezone
from graphwalk.sinks import ConsoleSink, RecordingSink, format_timestamp

from tests.conftest import FAKE_NOW_MS, PACIFIC


def test_format_timestamp_in_fixed_zone():
    assert format_timestamp(FAKE_NOW_MS, PACIFIC) == "[16:00:00.000]"
    assert format_timestamp(FAKE_NOW_MS + 5003, PACIFIC) == "[16:00:05.003]"


def test_format_timestamp_is_24_hour_and_zero_padded():
    assert format_timestamp(FAKE_NOW_MS, timezone.utc) == "[23:00:00.000]"
    assert format_timestamp(7 * 3600 * 1000 + 61_001, timezone.utc) == "[07:01:01.001]"


def test_format_timestamp_truncates_fractional_milliseconds():
    assert format_timestamp(999.9, timezone.utc) == "[00:00:00.999]"


def test_named_zone_matches_fixed_offset_in_summer():
    assert format_timestamp(FAKE_NOW_MS, resolve_timezone("America/Los_Angeles")) == (
        "[16:00:00.000]"
    )


def test_console_sink_writes_one_line_per_announcement():
    out = io.StringIO()
    sink = ConsoleSink(out, tz=PACIFIC)
    sink.announce(FAKE_NOW_MS, "A")
    sink.announce(FAKE_NOW_MS + 5000, "B")
    assert out.getvalue() == "[16:00:00.000] A\n[16:00:05.000] B\n"


def test_recording_sink_keeps_order():
    sink = RecordingSink(PACIFIC)
    sink.announce(FAKE_NOW_MS, "A")
    sink.announce(FAKE_NOW_MS + 1, "A")
    assert sink.calls == [(FAKE_NOW_MS, "A"), (FAKE_NOW_MS + 1, "A")]
    assert sink.nodes == ["A", "A"]
    assert sink.lines == ["[16:00:00.000] A", "[16:00:00.001] A"]
