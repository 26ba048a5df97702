"""
logs.py
-------
Process-wide logging setup for the CLI and the API app. Library modules
only create loggers; they never configure handlers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: Union[str, int] = "INFO", log_file: Optional[Path] = None) -> None:
    handlers: list[logging.Handler] = [RichHandler(rich_tracebacks=True, show_path=False)]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(fh)
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)
