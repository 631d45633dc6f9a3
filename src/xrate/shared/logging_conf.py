"""
Logging Configuration - Logging Setup for Applications Using xrate

The library itself only emits records through module loggers; it never
installs handlers. Applications call setup_logging() once at startup to
route those records to stdout and/or a rotating log file.

Files that USE this module:
- Applications embedding xrate (setup_logging function for logging initialization)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- xrate.config (settings for default log destinations and rotation)
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler

from xrate.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    log_to_stdout: Optional[bool] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
) -> Optional[Path]:
    """
    Configure application-wide logging settings.

    Arguments left as None fall back to the matching settings field
    (LOG_FILE, LOG_DIR, XRATE_LOG_STDOUT, LOG_MAX_BYTES, LOG_BACKUP_COUNT).

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; the file is named xrate.log
        log_to_stdout: Whether to also log to stdout
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Path of the log file, or None when logging only to stdout
    """
    log_file = log_file or settings.log_file
    log_dir = log_dir or settings.log_dir
    if log_to_stdout is None:
        log_to_stdout = settings.log_stdout
    max_bytes = max_bytes or settings.log_max_bytes
    backup_count = settings.log_backup_count if backup_count is None else backup_count

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    if log_to_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        handlers.append(stdout_handler)

    log_file_path: Optional[Path] = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "xrate.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # If no handlers specified, default to stdout
    if not handlers:
        fallback = logging.StreamHandler(sys.stdout)
        fallback.setFormatter(formatter)
        handlers = [fallback]

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.info("Logging configured: stdout, level=%s", level)
    return log_file_path
