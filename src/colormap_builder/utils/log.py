"""
log.py.

Does: Per-topic trace output for the builder. A topic prints only when listed in
      COLORMAP_DEBUG_TOPICS (comma-separated, or 'all'); nothing prints by default.
Returns: debug() for one-off lines, tracer(topic) for an injectable Trace callable.
Used by: loader.load, table.read_csv, cli --debug, tests.
"""

import os
import sys
from datetime import datetime
from typing import Callable, FrozenSet, TextIO

__all__ = ["ENV_VAR", "Trace", "debug", "enabled", "enable_topics", "reload_topics", "tracer"]

ENV_VAR = "COLORMAP_DEBUG_TOPICS"

Trace = Callable[[str], None]

_active: FrozenSet[str] = frozenset()


def _parse(raw: str) -> FrozenSet[str]:
    return frozenset(part.strip().lower() for part in raw.split(",") if part.strip())


def reload_topics() -> None:
    """Does: Re-read the active topics from COLORMAP_DEBUG_TOPICS."""
    global _active
    _active = _parse(os.getenv(ENV_VAR, ""))


def enable_topics(*topics: str) -> None:
    """Does: Turn topics on for this process; with no arguments, every topic."""
    global _active
    _active = _parse(",".join(topics)) or frozenset({"all"})


def enabled(topic: str) -> bool:
    return "all" in _active or topic.strip().lower() in _active


def debug(
    msg: str,
    topic: str = "colormap",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Write '[time] [topic][LEVEL] msg' to stderr when the topic is active."""
    if not enabled(topic):
        return
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{stamp}] [{topic.strip().lower()}][{level.upper()}] {msg}", file=stream or sys.stderr)


def tracer(topic: str) -> Trace:
    """Does: Bind `topic` into a Trace; activity is checked per call, not at bind time."""

    def _trace(msg: str) -> None:
        debug(msg, topic=topic)

    return _trace


reload_topics()
