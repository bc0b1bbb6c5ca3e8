"""Logging setup: console output plus daily-rotated log files."""

import logging
import logging.handlers
from pathlib import Path

from qqbot.config import LoggingConfig

_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
_LOG_FILE = "qqbot.log"


def setup_logging(config: LoggingConfig) -> None:
    """Configure the root logger from the [logging] config section.

    The console handler uses ``config.level``; the file handler always
    records DEBUG and rotates at midnight, keeping ``keep_days`` files.
    """
    log_dir = Path(config.dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    prune_logs(log_dir, config.max_total_mb)

    formatter = logging.Formatter(_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(config.level.upper())
    console.setFormatter(formatter)

    file_handler = logging.handlers.TimedRotatingFileHandler(
        log_dir / _LOG_FILE,
        when="midnight",
        backupCount=config.keep_days,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(console)
    root.addHandler(file_handler)

    # Transport libraries are noisy at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("websockets").setLevel(logging.INFO)


def prune_logs(log_dir: Path, max_total_mb: int) -> list[Path]:
    """Delete the oldest log files until the directory fits in ``max_total_mb``.

    Returns the deleted paths.
    """
    files = sorted(
        (p for p in log_dir.glob(f"{_LOG_FILE}*") if p.is_file()),
        key=lambda p: p.stat().st_mtime,
    )
    limit = max_total_mb * 1024 * 1024
    total = sum(p.stat().st_size for p in files)
    removed: list[Path] = []
    while files and total > limit:
        oldest = files.pop(0)
        total -= oldest.stat().st_size
        oldest.unlink()
        removed.append(oldest)
    return removed
