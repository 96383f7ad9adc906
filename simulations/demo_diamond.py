"""Diamond demo: one node reached along two paths is visited twice.

    A --1s--> B --3s--> D
    A --2s--> C --1s--> D

D is announced once per arrival: first through C (at ~3s), then through B
(at ~4s). The demo prints both the rendered announcements and a snapshot of
the pending queue right after the root was expanded, to show how visits sit
in the deque before they become due.
"""

import asyncio
from datetime import datetime, timezone

from graphwalk.scheduler import SimClock
from graphwalk.sinks import RecordingSink
from graphwalk.walker import GraphWalker

GRAPH = {
    "A": {"start": True, "edges": {"B": 1, "C": 2}},
    "B": {"edges": {"D": 3}},
    "C": {"edges": {"D": 1}},
    "D": {"edges": {}},
}


def run_scenario():
    start = int(datetime(2023, 5, 21, 16, 0, tzinfo=timezone.utc).timestamp() * 1000)
    clock = SimClock(start_ms=start)
    sink = RecordingSink()
    walker = GraphWalker(GRAPH, sink, clock.sleep, clock.now_ms)

    snapshots = []

    async def sleep(ms=None):
        if not snapshots:
            snapshots.append(walker.dump_state())
        await clock.sleep(ms)

    walker.sleep = sleep
    asyncio.run(walker.walk())
    return sink, snapshots[0] if snapshots else "", clock.now_ms() - start


def main():
    sink, snapshot, elapsed = run_scenario()
    print(snapshot)
    print()
    for line in sink.lines:
        print(line)
    print({"announcements": len(sink.calls), "elapsed_ms": elapsed})


if __name__ == "__main__":
    main()
