"""
Logging set-up for the Office Admin API.

Records go to the root logger so that uvicorn, FastAPI and our own
modules share one format.  ``setup_logging`` installs a console handler
and, when ``LOG_FILE`` is configured, a file handler.  The handlers it
installs carry a name, which is how repeated calls (one per
``create_app``) recognise their own work: foreign handlers such as the
ones pytest attaches are left alone and never suppress ours.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_PREFIX = "office_admin_api"


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.set_name(f"{HANDLER_PREFIX}.console")
    handlers: List[logging.Handler] = [console]

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(f"{HANDLER_PREFIX}.file")
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        File that also receives every record.  Parent directories are
        created.  Empty or ``None`` logs to the console only.
    """
    root = logging.getLogger()
    if _own_handlers(root):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in _build_handlers(logfile):
        root.addHandler(handler)
