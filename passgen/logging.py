"""
passgen.logging
Package logger setup: rich console handler plus an optional rotating log file.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "passgen"


def setup_logging(*, level: str = "WARNING", quiet: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level.upper())
    for h in list(log.handlers):
        log.removeHandler(h)

    if not quiet:
        h = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        h.setLevel(level.upper())
        h.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(h)

    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setLevel(level.upper())
        fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        log.addHandler(fh)

    return log


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
