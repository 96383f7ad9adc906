"""Runtime configuration read from environment variables.

- GRAPHWALK_TZ: zone used to render timestamps (default: UTC)
- GRAPHWALK_TICK_MS: suspension tick in milliseconds (default: 1)
- GRAPHWALK_LOG_LEVEL: logging level name (default: WARNING)
- GRAPHWALK_LOG_FILE: optional log file path
- GRAPHWALK_TIMEOUT_S: wall-clock bound for walks served over HTTP
- GRAPHWALK_HOST / GRAPHWALK_PORT: HTTP bind address (default: 0.0.0.0:8000)
"""

import logging
import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass
class WalkConfig:
    timezone: str = "UTC"
    tick_ms: float = 1.0
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    walk_timeout_s: Optional[float] = None
    host: str = "0.0.0.0"
    port: int = 8000

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"GRAPHWALK_LOG_LEVEL names an unknown level: {self.log_level!r}")
        if self.tick_ms <= 0:
            raise ValueError(f"GRAPHWALK_TICK_MS must be positive, got {self.tick_ms!r}")
        if self.walk_timeout_s is not None and self.walk_timeout_s <= 0:
            raise ValueError(
                f"GRAPHWALK_TIMEOUT_S must be positive, got {self.walk_timeout_s!r}"
            )
        self.tz = resolve_timezone(self.timezone)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "WalkConfig":
        """Build a config from `env` (defaults to `os.environ`)."""
        env = os.environ if env is None else env
        return cls(
            timezone=env.get("GRAPHWALK_TZ", "UTC"),
            tick_ms=_number(env, "GRAPHWALK_TICK_MS", 1.0),
            log_level=env.get("GRAPHWALK_LOG_LEVEL", "WARNING").upper(),
            log_file=env.get("GRAPHWALK_LOG_FILE") or None,
            walk_timeout_s=_number(env, "GRAPHWALK_TIMEOUT_S", None),
            host=env.get("GRAPHWALK_HOST", "0.0.0.0"),
            port=int(_number(env, "GRAPHWALK_PORT", 8000)),
        )


def _number(env: Mapping[str, str], key: str, default):
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


def resolve_timezone(name: str) -> tzinfo:
    """Map a zone name (`UTC` or an IANA name such as `America/Los_Angeles`)."""
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"GRAPHWALK_TZ names an unknown time zone: {name!r}") from None
