"""mdindex - Generate an index.md summary page for a directory of Markdown.

Each document in the category directory becomes a collapsible
``<details>`` block with an escaped preview as its summary.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdindex.config import LogConfig

__version__ = "0.1.0"

LOG_FILENAME = "mdindex.log"


def setup_logging(config: LogConfig) -> None:
    """Configure the ``mdindex`` logger for console and optional file output.

    Existing handlers are removed first so repeated calls (tests, multiple
    CLI invocations in one process) don't stack duplicate output.
    """
    package_logger = logging.getLogger(__name__)
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Console handler - stderr, level from config
    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger.addHandler(console_handler)

    if config.log_dir is None:
        return

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = config.log_dir / LOG_FILENAME
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(file_handler)

    package_logger.debug("Logging configured. Log file: %s", log_file.absolute())
