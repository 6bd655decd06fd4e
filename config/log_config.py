"""Loguru logging configuration for the readability fixture generator.

This module provides centralized logging configuration using Loguru.
Call configure_logging() at startup of every entry point.
"""
import os
import sys
import logging
from loguru import logger


VALID_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def resolve_log_level(log_level: str | None = None) -> str:
    """
    Pick the effective log level.

    Priority: parameter > LOG_LEVEL env var > INFO. Unknown names fall back to INFO.
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "INFO")
    log_level = log_level.upper()

    if log_level not in VALID_LEVELS:
        return "INFO"
    return log_level


def configure_logging(
    log_level: str | None = None,
    enable_json: bool = False,
    enable_file_logging: bool = False,
    log_file_path: str = "logs/fixture_generator.log",
) -> None:
    """
    Configure Loguru logging for the application.

    This function:
    1. Removes default Loguru handler
    2. Adds custom console handler with formatting
    3. Optionally adds JSON and file handlers
    4. Intercepts standard library logging (src/ modules, requests, urllib3)

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to LOG_LEVEL env var or INFO.
        enable_json: Enable JSON structured logging format
        enable_file_logging: Enable file logging in addition to console
        log_file_path: Path for log file (default: logs/fixture_generator.log)

    Example:
        from config.log_config import configure_logging

        configure_logging()  # Uses defaults
        configure_logging(log_level="DEBUG", enable_file_logging=True)
    """
    log_level = resolve_log_level(log_level)

    # Remove default handler (Loguru adds stderr handler by default)
    logger.remove()

    if enable_json:
        logger.add(
            sys.stderr,
            level=log_level,
            serialize=True,
        )
    else:
        log_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
        logger.add(
            sys.stderr,
            format=log_format,
            level=log_level,
            colorize=True,
        )

    if enable_file_logging:
        logger.add(
            log_file_path,
            rotation="10 MB",
            retention="7 days",
            level=log_level,
            serialize=enable_json,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # readability-lxml logs every candidate it scores at DEBUG/INFO
    logging.getLogger("readability").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.debug(f"Logging configured: level={log_level}, json={enable_json}, file={enable_file_logging}")


class InterceptHandler(logging.Handler):
    """
    Intercept standard library logging and redirect to Loguru.

    The src/ modules log through logging.getLogger(__name__), as do
    requests, urllib3 and readability-lxml.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


__all__ = ["logger", "configure_logging", "resolve_log_level", "InterceptHandler"]
