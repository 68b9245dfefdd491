"""Logger configuration for PlankFlow.

Library code only ever does `from loguru import logger`; handlers are
installed by the entry point (the CLI) through `setup_logger` or
`configure_from_settings`.
"""

import sys
from pathlib import Path

from loguru import logger

from plankflow.config.settings import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru with a console handler and an optional rotating file.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file. If None, console only.
        rotation: Log rotation size or interval (e.g., "10 MB", "1 day")
        retention: How long rotated files are kept (e.g., "7 days")
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=level == "DEBUG",
        )

    logger.debug(f"Logger initialized with level={level}, file={log_file}")


def configure_from_settings(settings: Settings, debug: bool = False) -> None:
    """Install handlers from PLANKFLOW_LOG_LEVEL / PLANKFLOW_LOG_FILE; `debug` forces DEBUG."""
    setup_logger(level="DEBUG" if debug else settings.log_level, log_file=settings.log_file)
