"""
log.py.

Does: Lightweight debug logger controlled by COLORLENS_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the classifier,
         the model adapter and the CLI.
"""

import os
import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enable_topics", "topic_enabled"]

ENV_VAR = "COLORLENS_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable COLORLENS_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(topics: Iterable[str]) -> None:
    """Does: Turn on extra topics for this process (CLI --debug uses 'all')."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _DEBUG_TOPICS | {t.strip().lower() for t in topics if t.strip()}


def topic_enabled(topic: str) -> bool:
    """Does: Tell whether a topic would print. Empty topic set means nothing prints."""
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "classify",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via COLORLENS_DEBUG_TOPICS.
    """
    if not topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
