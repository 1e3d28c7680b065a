"""Logging utilities with emoji level prefixes.

Usage:
    from .logging import get_logger
    logger = get_logger(__name__)
"""
from __future__ import annotations

import logging
import sys
from typing import Dict

ROOT_LOGGER = "custom_labels"

_LEVEL_EMOJI: Dict[int, str] = {
    logging.DEBUG: "🔍",
    logging.INFO: "🟢",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "🔥",
}


class _EmojiFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - simple override
        emoji = _LEVEL_EMOJI.get(record.levelno, "▫️")
        # format a copy so the record seen by other handlers keeps its message
        record = logging.makeLogRecord(record.__dict__)
        record.msg = f"{emoji} {record.msg}"
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package root; the root gets the emoji handler once.

    Idempotent: calling multiple times won't duplicate handlers.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = _EmojiFormatter("%(asctime)s | %(name)s | %(levelname)s | %(message)s", "%H:%M:%S")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if not name or name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Set the level for every logger in the package."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    get_logger().setLevel(level)
