"""Graph sources: turn a file path or URL into a parsed graph mapping."""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict

import aiohttp

from .errors import GraphLoadError

FETCH_TIMEOUT_S = 300.0


def parse_graph(text: str, source: str = "<string>") -> Dict[str, Any]:
    """Decode JSON `text` into a graph; the top level must be an object."""
    try:
        graph = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphLoadError(source, f"invalid JSON ({e})") from e
    if not isinstance(graph, dict):
        raise GraphLoadError(source, f"expected a JSON object, got {type(graph).__name__}")
    return graph


async def fetch_text(url: str, timeout_s: float = FETCH_TIMEOUT_S) -> str:
    """GET `url` and return the response body as text.

    `timeout_s` bounds the whole request, connection and body included.
    """
    try:
        timeout = aiohttp.ClientTimeout(total=timeout_s)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.text()
    except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
        raise GraphLoadError(url, str(e) or type(e).__name__) from e


async def load_graph(source: str, timeout_s: float = FETCH_TIMEOUT_S) -> Dict[str, Any]:
    """Load a graph from an http(s) URL or a UTF-8 JSON file path."""
    if source.startswith(("http://", "https://")):
        text = await fetch_text(source, timeout_s)
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise GraphLoadError(source, str(e)) from e
    return parse_graph(text, source)
