"""Round-robin visit scheduler.

Pending visits live in a single deque with two fixed access ends:

- new visits are always inserted at the head (`appendleft`);
- the walker always examines the tail (`pop`).

A visit that is not due yet goes back to the head and the walker requests one
tick from the suspension primitive before looking at the next tail entry.
Announcement order therefore follows from repeated rotation, not from sorting
by due time; swapping the deque for a heap would change observable output.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict

from .graph import Edges, Graph, NodeValidator, find_root
from .protocols import Sink, Sleep

logger = logging.getLogger(__name__)


@dataclass
class PendingVisit:
    """A scheduled visit of `node`, due at epoch `ready_at` milliseconds."""

    node: str
    ready_at: float
    edges: Edges


class GraphWalker:
    """Walk a graph, announcing each visit to `sink` once it is due.

    Parameters:
    - graph: parsed graph mapping; read-only for the duration of the walk.
    - sink: receives `(at_ms, node)` for every announcement.
    - sleep: awaitable suspension primitive, called with no argument for one
      tick whenever the examined visit is not due.
    - now_ms: ambient clock reading in epoch milliseconds.
    """

    def __init__(
        self,
        graph: Graph,
        sink: Sink,
        sleep: Sleep,
        now_ms: Callable[[], float],
    ) -> None:
        self.graph = graph
        self.sink = sink
        self.sleep = sleep
        self.now_ms = now_ms
        self.validator = NodeValidator(graph)
        self.queue: Deque[PendingVisit] = deque()
        self.stats = {"announced": 0, "ticks": 0}

    async def walk(self) -> None:
        """Run until no visit is pending.

        Validation errors propagate immediately; there is no cycle guard, so
        a cyclic graph keeps the walk running forever.
        """
        root = find_root(self.graph)
        if root is None:
            logger.info("empty graph, nothing to walk")
            return
        self.queue.appendleft(
            PendingVisit(root, self.now_ms(), self.validator.validate(root, reached=False))
        )
        logger.info("walking from root %r", root)

        while self.queue:
            visit = self.queue.pop()
            now = self.now_ms()
            if now < visit.ready_at:
                self.queue.appendleft(visit)
                self.stats["ticks"] += 1
                await self.sleep()
                continue
            self._announce(now, visit)

        logger.info("walk finished after %d announcements", self.stats["announced"])

    def _announce(self, now: float, visit: PendingVisit) -> None:
        self.sink.announce(now, visit.node)
        self.stats["announced"] += 1
        logger.debug("visited %r at %s (due %s)", visit.node, now, visit.ready_at)
        for target, weight in visit.edges:
            edges = self.validator.validate(target)
            self.queue.appendleft(PendingVisit(target, now + weight * 1000, edges))
            logger.debug("scheduled %r -> %r in %ss", visit.node, target, weight)

    def dump_state(self, n: int = 5) -> str:
        """Return a human-readable snapshot of the pending queue.

        Entries are listed in examination order (tail first), at most `n` of
        them, without changing the queue.
        """
        now = self.now_ms()
        lines = [
            f"GraphWalker @ t = {now}ms",
            f"queued = {len(self.queue)} (showing first {min(n, len(self.queue))})",
        ]
        for i, visit in enumerate(reversed(self.queue)):
            if i >= n:
                break
            remaining = max(0, visit.ready_at - now)
            lines.append(
                f"#{i:02d} {visit.node} due @ {visit.ready_at}ms (in {remaining}ms) edges={len(visit.edges)}"
            )
        return "\n".join(lines)

    def brief_state(self) -> Dict[str, Any]:
        """JSON-friendly summary used by the HTTP runtime's /state endpoint."""
        return {
            "now_ms": self.now_ms(),
            "stats": dict(self.stats),
            "pending": [
                {"node": v.node, "ready_at": v.ready_at} for v in reversed(self.queue)
            ],
        }
