"""Console + optional file logging configuration."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(log_dir: Path | None = None, level: int = logging.INFO) -> None:
    """Configure root logger with console + optional file handler.

    Safe to call more than once: the stdout handler is installed only on
    the first call, but its level is reset every time, so a later call
    with ``logging.DEBUG`` (the CLI's ``--verbose``) takes effect.

    Args:
        log_dir: If provided, a ``morsetone.log`` file handler is added.
        level: Logging level for both handlers.
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s",
        datefmt="%H:%M:%S",
    )

    # Console handler (only add once)
    console = next(
        (h for h in root.handlers
         if isinstance(h, logging.StreamHandler) and h.stream is sys.stdout),
        None,
    )
    if console is None:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(fmt)
        root.addHandler(console)
    console.setLevel(level)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "morsetone.log", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)
