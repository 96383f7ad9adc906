"""Clocks and suspension primitives for the walker.

- `SimClock`: deterministic time in epoch milliseconds; `sleep()` moves time
  forward instead of waiting, so a whole walk runs instantly and
  reproducibly.
- `WallClock`: real time from `time.time()` with suspension built on
  `asyncio.sleep`.

Both expose the same pair of operations the walker needs:

    now_ms()            # ambient "now" reading
    await sleep(ms=None)  # yield for `ms`, or for one tick when omitted

Typical simulated run:

    clock = SimClock(start_ms=...)
    walker = GraphWalker(graph, sink, clock.sleep, clock.now_ms)
    asyncio.run(walker.walk())
"""

import asyncio
import time
from typing import Optional


class SimClock:
    """Simulated clock measured in epoch milliseconds."""

    def __init__(self, start_ms: float = 0, tick_ms: float = 1) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms!r}")
        self.t = start_ms
        self.tick_ms = tick_ms
        self.ticks = 0

    def now_ms(self) -> float:
        """Return the current simulated time in milliseconds."""
        return self.t

    def advance(self, ms: float) -> None:
        """Advance simulated time by `ms` milliseconds (non-negative)."""
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards by {ms!r}ms")
        self.t += ms

    async def sleep(self, ms: Optional[float] = None) -> None:
        """Advance time by `ms`, or by one tick when called without arguments.

        Never suspends the event loop; the caller simply observes a later
        `now_ms()` afterwards.
        """
        if ms is None:
            self.ticks += 1
            ms = self.tick_ms
        self.advance(ms)


class WallClock:
    """Real clock for running walks against actual elapsed time."""

    def __init__(self, tick_ms: float = 1) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms!r}")
        self.tick_ms = tick_ms

    def now_ms(self) -> float:
        """Return wall-clock time in whole epoch milliseconds."""
        return int(time.time() * 1000)

    async def sleep(self, ms: Optional[float] = None) -> None:
        """Suspend on the running event loop for `ms` or one tick."""
        await asyncio.sleep((self.tick_ms if ms is None else ms) / 1000.0)
