"""Command-line entry point: walk a graph file and print each visit.

    graphwalk path/to/graph.json
    graphwalk https://example.com/graph.json

Announcements go to stdout as `[HH:MM:SS.mmm] NODE` lines. Errors go to
stderr and produce exit status 1.

Environment variables (see `graphwalk.config`):
- GRAPHWALK_TZ: time zone used for timestamps
- GRAPHWALK_TICK_MS: suspension tick while waiting for the next visit
- GRAPHWALK_LOG_LEVEL / GRAPHWALK_LOG_FILE: diagnostics
"""

import asyncio
import sys
from typing import Callable, List, Optional

from graphwalk.config import WalkConfig
from graphwalk.errors import GraphError, GraphLoadError
from graphwalk.logging_config import get_logger, setup_logger
from graphwalk.protocols import Sink, Sleep
from graphwalk.scheduler import WallClock
from graphwalk.sinks import ConsoleSink
from graphwalk.source import load_graph
from graphwalk.walker import GraphWalker

logger = get_logger(__name__)


async def run_walk(
    source: str,
    sink: Optional[Sink] = None,
    now_ms: Optional[Callable[[], float]] = None,
    sleep: Optional[Sleep] = None,
    config: Optional[WalkConfig] = None,
) -> GraphWalker:
    """Load the graph at `source` and walk it to completion.

    Collaborators default to a console sink and the wall clock; tests inject
    a recording sink and a `SimClock`. `now_ms` and `sleep` are one time
    domain, so they are injected together or not at all.
    """
    if (now_ms is None) != (sleep is None):
        raise ValueError("now_ms and sleep must come from the same clock; pass both or neither")
    config = config or WalkConfig()
    graph = await load_graph(source)
    clock = WallClock(config.tick_ms)
    walker = GraphWalker(
        graph,
        sink if sink is not None else ConsoleSink(tz=config.tz),
        sleep if sleep is not None else clock.sleep,
        now_ms if now_ms is not None else clock.now_ms,
    )
    await walker.walk()
    return walker


def main(argv: Optional[List[str]] = None) -> int:
    """Run a walk for the first argument; return the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("missing required argument <graph-file>", file=sys.stderr)
        return 1
    try:
        config = WalkConfig.from_env()
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1
    setup_logger(config.log_level, config.log_file)
    try:
        asyncio.run(run_walk(argv[0], config=config))
    except (GraphError, GraphLoadError) as e:
        logger.debug("walk aborted", exc_info=True)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
