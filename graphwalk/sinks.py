"""Announcement sinks.

The walker hands each sink a raw `(at_ms, node)` pair. Sinks render the
instant as a fixed-width 24-hour clock with millisecond precision, e.g.
`[16:00:00.000]`, in a time zone given to them at construction time.
"""

import sys
from datetime import datetime, timezone, tzinfo
from typing import List, Optional, TextIO, Tuple


def format_timestamp(at_ms: float, tz: tzinfo = timezone.utc) -> str:
    """Render epoch milliseconds as `[HH:MM:SS.mmm]` in zone `tz`."""
    total = int(at_ms)
    seconds, millis = divmod(total, 1000)
    dt = datetime.fromtimestamp(seconds, tz)
    return f"[{dt:%H:%M:%S}.{millis:03d}]"


class ConsoleSink:
    """Writes one `<timestamp> <node>` line per announcement to `stream`."""

    def __init__(self, stream: Optional[TextIO] = None, tz: tzinfo = timezone.utc) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.tz = tz

    def announce(self, at_ms: float, node: str) -> None:
        print(format_timestamp(at_ms, self.tz), node, file=self.stream, flush=True)


class RecordingSink:
    """Keeps every announcement in memory, in order."""

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self.tz = tz
        self.calls: List[Tuple[float, str]] = []

    def announce(self, at_ms: float, node: str) -> None:
        self.calls.append((at_ms, node))

    @property
    def nodes(self) -> List[str]:
        return [node for _, node in self.calls]

    @property
    def lines(self) -> List[str]:
        """Rendered `<timestamp> <node>` lines, as a console would show them."""
        return [f"{format_timestamp(at, self.tz)} {node}" for at, node in self.calls]
