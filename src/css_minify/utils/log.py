"""
log.py.

Does: Topic-filtered debug tracer. Topics are enabled via CSS_MINIFY_DEBUG_TOPICS
      (comma-sep or 'all'); enabled lines go out on the "css_minify.trace" logger.
Returns: debug(), reload_topics(), enable_all_topics(). Used by the adapter and CLI.
"""

import logging
import os
import sys

__all__ = ["TRACE_LOGGER", "debug", "reload_topics", "enable_all_topics", "topic_enabled"]

ENV_VAR = "CSS_MINIFY_DEBUG_TOPICS"
TRACE_LOGGER = "css_minify.trace"


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stderr is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def _make_logger() -> logging.Logger:
    trace = logging.getLogger(TRACE_LOGGER)
    if not any(isinstance(h, _StderrHandler) for h in trace.handlers):
        handler = _StderrHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(topic)s][%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        trace.addHandler(handler)
    # trace lines are opt-in per topic; keep them off the root handlers
    trace.propagate = False
    if trace.level == logging.NOTSET:
        trace.setLevel(logging.DEBUG)
    return trace


_TRACE = _make_logger()


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable CSS_MINIFY_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_all_topics() -> None:
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = {"all"}


def topic_enabled(topic: str) -> bool:
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(msg: str, topic: str = "minify", *, level: str = "DEBUG") -> None:
    """Does: Log msg on the trace logger, tagged with its topic,
    if the topic is enabled via CSS_MINIFY_DEBUG_TOPICS.
    """
    if not topic_enabled(topic):
        return
    levelno = logging.getLevelName(level.upper())
    if not isinstance(levelno, int):
        levelno = logging.DEBUG
    _TRACE.log(levelno, msg, extra={"topic": topic.lower().strip()})
