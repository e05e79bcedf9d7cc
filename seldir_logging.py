"""File logging for seldir. The terminal belongs to the UI, so logs go to disk."""

import logging
from pathlib import Path

LOG_DIR = Path.home() / ".cache" / "seldir"
LOG_FORMAT = '%(asctime)s | %(levelname)-7s | %(message)s'


def setup_logging(debug: bool = False, log_file: Path = None) -> logging.Logger:
    """Attach a single file handler to the seldir logger tree."""
    log_file = log_file or LOG_DIR / "seldir.log"
    logger = logging.getLogger("seldir")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.handlers.clear()  # Remove any existing handlers
    logger.propagate = False

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode='a')
    except OSError:
        # No writable log location: stay silent rather than write over the UI
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
