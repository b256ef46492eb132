"""
Logging configuration for the Taskboard service.
"""
from typing import Optional
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Send service logs to stdout and, when ``log_dir`` is given, to
    ``<log_dir>/taskboard.log`` as well.

    File logging is skipped with a warning if the directory cannot be created.
    Handlers installed by an earlier call are replaced.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, "taskboard.log")))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )
