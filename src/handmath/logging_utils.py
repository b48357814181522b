"""
logging_utils.py
----------------

Logging setup for the `handmath` command line.

Library modules only emit records on the "handmath" logger tree (debug for
per-glyph details, warnings when the stroke engine is missing or fails).
`configure_logging` attaches a colorized console handler and, unless
disabled, a rotating per-run log file. Calling it again replaces the
handlers instead of stacking them.
"""

__all__ = ["configure_logging", "ColorFormatter"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, init as colorama_init

PathLike = Union[str, os.PathLike]


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = Style.RESET_ALL
        line = (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{record.name}] "
            f"[{color}{record.levelname:<5s}{reset}] "
            f"{record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(level: Optional[int] = logging.INFO,
                      log_dir: Optional[PathLike] = "logs",
                      name: Optional[str] = "handmath",
                      run_prefix: Optional[str] = "run") -> Optional[Path]:
    """Configure colorized console + rotating file logging.

    Existing handlers on the named logger are replaced, so repeated calls
    do not duplicate output. With `log_dir=None` only the console handler
    is installed and None is returned.
    """
    colorama_init(strip=False, convert=True)
    mono_fmt = "[%(asctime)s] [%(name)s] [%(levelname)-5s] %(message)s"
    datefmt = "%H:%M:%S"

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=datefmt))
    logger.addHandler(ch)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y-%m-%d_%H%M%S")
    log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"

    fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5, encoding="utf-8")
    fh.setFormatter(logging.Formatter(mono_fmt, datefmt))
    logger.addHandler(fh)

    logger.info(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
