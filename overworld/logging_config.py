"""
Logging setup for Overworld.

Generation runs log everything to a rotating file in the data directory and
only warnings and errors to stderr. Modules get their logger through
get_logger(__name__) so it lands under the "overworld" namespace.

Usage:
    from overworld.logging_config import setup_logging, get_logger
    setup_logging(data_root)  # once, at startup
    logger = get_logger(__name__)
"""

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "overworld"

LOG_FILE_NAME = "debug.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # bytes per file before rotating
BACKUP_COUNT = 5

FILE_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-35s | %(funcName)-25s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

_announced = False


def _file_handler(log_path: Path, level: int) -> logging.Handler:
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
    return handler


def setup_logging(
    data_root: Path | str,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Path:
    """
    Install the file and console handlers on the overworld logger.

    Calling it again replaces the handlers, so tests and the CLI can point
    logging at a different directory.

    Args:
        data_root: Directory for the log file (created if missing)
        log_level: Level for the file handler
        console_level: Level for the stderr handler

    Returns:
        Path to the log file
    """
    global _announced

    log_dir = Path(data_root)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    root.addHandler(_file_handler(log_path, log_level))
    root.addHandler(_console_handler(console_level))

    if not _announced:
        root.info(f"Overworld logging started {datetime.now().isoformat()} -> {log_path.absolute()}")
        _announced = True

    return log_path


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, namespaced under "overworld"."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# Structured Logging Helpers
# =============================================================================


def log_chunk(
    logger: logging.Logger,
    action: str,
    coord: tuple[int, int],
    details: str | None = None,
) -> None:
    """Log a chunk being generated or torn down."""
    details_str = f" | {details}" if details else ""
    logger.debug(f"CHUNK | {action} | ({coord[0]}, {coord[1]}){details_str}")


def log_maintenance(
    logger: logging.Logger,
    viewer_chunk: tuple[int, int],
    loaded: int,
    unloaded: int,
    duration_ms: int | None = None,
) -> None:
    """Log one chunk maintenance pass."""
    duration_str = f" | {duration_ms}ms" if duration_ms else ""
    logger.info(
        f"MAINTENANCE | viewer=({viewer_chunk[0]}, {viewer_chunk[1]}) | "
        f"loaded={loaded} | unloaded={unloaded}{duration_str}"
    )


def log_solver(
    logger: logging.Logger,
    state: str,
    width: int,
    height: int,
    duration_ms: int | None = None,
    details: str | None = None,
) -> None:
    """Log tile solver progress."""
    duration_str = f" | {duration_ms}ms" if duration_ms else ""
    details_str = f" | {details}" if details else ""
    logger.info(f"SOLVER | {width}x{height} | {state}{duration_str}{details_str}")
