"""Interfaces (Protocols) that decouple the walker from I/O and timers.

The walker depends only on these minimal abstractions, so the deterministic
simulated clock and the wall-clock runtime can be swapped in without changes.
"""

from typing import Awaitable, Optional, Protocol


class Sink(Protocol):
    """Receives announcements in the exact order the walker emits them."""

    def announce(self, at_ms: float, node: str) -> None:
        """Report that `node` was visited at epoch time `at_ms` (milliseconds).

        Rendering the timestamp (time zone, format) is the sink's business;
        the walker only hands over the raw instant.
        """
        raise NotImplemented


class Sleep(Protocol):
    """Suspension primitive used by the walker to yield control."""

    def __call__(self, ms: Optional[float] = None) -> Awaitable[None]:
        """Return control after `ms` milliseconds, or after one tick if omitted."""
        raise NotImplemented


class Clock(Protocol):
    """Time domain pairing the "now" reading with its suspension primitive."""

    def now_ms(self) -> float:
        """Return the current time in epoch milliseconds for this clock domain."""
        raise NotImplemented

    def sleep(self, ms: Optional[float] = None) -> Awaitable[None]:
        """Suspend for `ms` milliseconds, or one tick if omitted."""
        raise NotImplemented
