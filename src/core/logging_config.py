"""Centralized logging configuration for the testimonial analyzer."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str | int = "INFO") -> None:
    """Configure the root logger once with a single stdout handler.

    Streamlit re-executes the entry script on every interaction, so repeated
    calls only update the level instead of stacking handlers.

    Args:
        level: Logging level name or number (e.g. ``"DEBUG"``).
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    if any(getattr(h, "_analyzer_handler", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._analyzer_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
