from __future__ import annotations

"""Logging utilities.

Set up a consistent logging configuration to both console and a file
in the `logs/` directory. Streamlit reruns the app script on every
interaction, so configuration is applied once per process only.
"""

import logging
from pathlib import Path


_CONFIGURED = False


def configure_logging(log_dir: Path, debug: bool = False) -> None:
    """Configure root logging for the application.

    - Creates the log directory if missing
    - Streams logs to both stdout and `logs/app.log`
    - Uses DEBUG level if `debug=True`, otherwise INFO
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    logging.basicConfig(
        level=level,
        format=fmt,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, mode="a", encoding="utf-8"),
        ],
    )
    _CONFIGURED = True
