import os
import sys
from pathlib import Path

from loguru import logger


def configure_logger(
    env: str = "development",
    console_level: str = None,
    file_level: str = "DEBUG",
    error_file_level: str = "ERROR",
    log_dir: str = "logs",
) -> None:
    """
    Configure the Loguru logger for the product-service.

    Adds a colorized console sink plus two rotating file sinks: one for
    everything at `file_level` and above, one for errors only.

    Args:
        env: Environment ("development" or "production") to set default log levels.
        console_level: Log level for console output (overrides env-based default).
        file_level: Log level for the general log file.
        error_file_level: Log level for the error log file.
        log_dir: Directory the log files are written to.
    """
    logger.remove()

    log_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | "
        "{module}:{function}:{line} - {message} | {extra}"
    )

    default_console_level = "DEBUG" if env.lower() == "development" else "INFO"
    console_level = console_level or default_console_level

    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    logger.add(
        sys.stderr,
        format=log_format,
        level=console_level.upper(),
        backtrace=True,
        diagnose=env.lower() == "development",
        colorize=True,
    )

    logger.add(
        log_path / "app.log",
        format=log_format,
        level=file_level.upper(),
        rotation="10 MB",
        retention="7 days",
        compression="zip",
        backtrace=True,
    )

    logger.add(
        log_path / "error.log",
        format=log_format,
        level=error_file_level.upper(),
        rotation="5 MB",
        retention="30 days",
        compression="zip",
        backtrace=True,
    )

    logger.info(
        "Logger configured for {} environment",
        env,
        console_level=console_level,
        file_level=file_level,
        error_file_level=error_file_level,
    )


configure_logger(
    env=os.getenv("ENV", "development"),
    console_level=os.getenv("CONSOLE_LOG_LEVEL"),
    file_level=os.getenv("FILE_LOG_LEVEL", "DEBUG"),
    error_file_level=os.getenv("ERROR_LOG_LEVEL", "ERROR"),
    log_dir=os.getenv("LOG_DIR", "logs"),
)

log = logger
