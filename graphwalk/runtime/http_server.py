"""HTTP runtime for walking graphs submitted over the network.

This module exposes two endpoints via FastAPI:
- POST /walk: walk the graph in the request body and return its
  announcement lines.
- GET /state: fetch the brief state of the latest walk for dashboards.

The server is the caller that imposes a wall-clock bound on walks
(`GRAPHWALK_TIMEOUT_S`); the walker itself has none. The bound is enforced
both by cancelling walks that suspend and by the sink, for walks that never do.
"""

import asyncio
import time
from datetime import tzinfo
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from graphwalk.config import WalkConfig
from graphwalk.errors import GraphError
from graphwalk.logging_config import get_logger, setup_logger
from graphwalk.protocols import Clock
from graphwalk.scheduler import WallClock
from graphwalk.sinks import RecordingSink
from graphwalk.walker import GraphWalker

logger = get_logger(__name__)


class WalkTimeout(Exception):
    """The walk used up its wall-clock budget."""


class DeadlineSink(RecordingSink):
    """Recording sink that ends the walk once `timeout_s` of real time has passed.

    A zero-weight cycle never suspends, so cancelling the task cannot stop
    it; it does announce on every step, which is where the deadline is
    checked.
    """

    def __init__(self, tz: tzinfo, timeout_s: Optional[float]) -> None:
        super().__init__(tz)
        self.deadline = None if timeout_s is None else time.monotonic() + timeout_s

    def announce(self, at_ms: float, node: str) -> None:
        super().announce(at_ms, node)
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise WalkTimeout()


class WalkServer:
    """FastAPI app wrapping one walker per request.

    Parameters:
    - config: runtime configuration (time zone, tick, timeout).
    - clock: object with `now_ms()` and `async sleep(ms=None)`; defaults to
      a `WallClock`. Tests pass a `SimClock`.
    """

    def __init__(self, config: Optional[WalkConfig] = None, clock: Optional[Clock] = None):
        self.app = FastAPI()
        self.config = config or WalkConfig()
        self.clock = clock if clock is not None else WallClock(self.config.tick_ms)
        self.walker: Optional[GraphWalker] = None

        @self.app.post("/walk")
        async def walk(graph: Dict[str, Any]):
            """Walk `graph` and report every announcement made."""
            sink = DeadlineSink(self.config.tz, self.config.walk_timeout_s)
            self.walker = GraphWalker(graph, sink, self.clock.sleep, self.clock.now_ms)
            try:
                await asyncio.wait_for(
                    self.walker.walk(), timeout=self.config.walk_timeout_s
                )
            except GraphError as e:
                logger.warning("walk failed: %s", e)
                return JSONResponse(
                    status_code=422,
                    content={
                        "ok": False,
                        "kind": type(e).__name__,
                        "error": str(e),
                        "node": e.node,
                        "announcements": sink.lines,
                    },
                )
            except (asyncio.TimeoutError, WalkTimeout):
                logger.warning(
                    "walk exceeded %ss after %d announcements",
                    self.config.walk_timeout_s,
                    len(sink.calls),
                )
                return JSONResponse(
                    status_code=504,
                    content={
                        "ok": False,
                        "kind": "Timeout",
                        "error": f"walk did not finish within {self.config.walk_timeout_s}s",
                        "announcements": sink.lines,
                    },
                )
            return {"ok": True, "announcements": sink.lines}

        @self.app.get("/state")
        async def state():
            if self.walker is None:
                return {"error": "no_walk"}
            return self.walker.brief_state()


def main():
    """Boot the server with configuration from the environment."""
    config = WalkConfig.from_env()
    setup_logger(config.log_level, config.log_file)
    server = WalkServer(config)
    uvicorn.run(server.app, host=config.host, port=config.port, log_level="warning")


if __name__ == "__main__":
    main()
