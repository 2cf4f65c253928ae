"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.

Features:
- Structured logging with Loguru
- Standard library logging interception (routes stdlib logging to Loguru)
- Third-party library logger configuration (httpx, uvicorn)
- JSON logging format option for production
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger  # type: ignore


VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# Handler ids added by setup_logger(), used to keep setup idempotent
_handler_ids: List[int] = []


# =============================================================================
# Standard Library Logging Interception
# =============================================================================


class InterceptHandler(logging.Handler):
    """
    Intercept standard library logging and route to Loguru.

    Uvicorn and httpx log through stdlib logging; this keeps their output
    formatted consistently with the application's own logs.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where logging call originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_standard_logging() -> None:
    """Route Python standard library logging through Loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def configure_third_party_loggers() -> None:
    """
    Configure third-party library loggers to reduce noise.
    """
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("multipart").setLevel(logging.WARNING)


def format_exception_short(exception: Exception, context: Optional[str] = None) -> str:
    """
    Format exception to be short and readable.

    Args:
        exception: Exception object
        context: Optional context message

    Returns:
        Short formatted error message

    Example:
        >>> try:
        ...     raise ValueError("Invalid input")
        ... except ValueError as e:
        ...     print(format_exception_short(e, "Calling provider"))
        Calling provider | ValueError: Invalid input | (gateway.py:42)
    """
    try:
        exc_type = type(exception).__name__
        exc_message = str(exception)

        # Last frame of the traceback is where the error was raised
        tb = exception.__traceback__
        if tb:
            while tb.tb_next:
                tb = tb.tb_next
            filename = Path(tb.tb_frame.f_code.co_filename).name
            location = f"{filename}:{tb.tb_lineno}"
        else:
            location = "unknown"

        parts = []
        if context:
            parts.append(context)
        parts.append(f"{exc_type}: {exc_message}")
        parts.append(f"({location})")

        return " | ".join(parts)

    except Exception:
        return f"{type(exception).__name__}: {str(exception)}"


# =============================================================================
# JSON Logging Format
# =============================================================================


def serialize_log_record(record: dict) -> str:
    """
    Serialize log record to a flat JSON dictionary.

    Replaces Loguru's nested JSON serialization with a flattened structure
    suitable for log aggregation.

    Args:
        record: Loguru record dictionary

    Returns:
        JSON string representation of the log record
    """
    log_record = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["module"],
        "function": record["function"],
        "line": record["line"],
    }

    if record.get("exception"):
        exception = record["exception"]
        log_record["exception"] = {
            "type": exception.type.__name__ if exception.type else "Unknown",
            "message": str(exception.value),
        }

    # Context variables bound via logger.bind()
    if record.get("extra"):
        for key, value in record["extra"].items():
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, OverflowError):
                log_record[key] = str(value)

    # Loguru calls format() on the result, so braces and color tags are escaped
    return (
        json.dumps(log_record).replace("{", "{{").replace("}", "}}").replace("<", "\\<")
        + "\n"
    )


def _resolve_level(level: Optional[str], debug: bool) -> str:
    if level:
        level = level.upper()
        return level if level in VALID_LEVELS else "INFO"
    return "DEBUG" if debug else "INFO"


def setup_logger() -> None:
    """
    Configure logger handlers for the main application.

    Only configures once even if called multiple times.
    Supports both console (colored) and JSON formats based on LOG_FORMAT setting.
    """
    from .config import get_settings

    if _handler_ids and all(i in logger._core.handlers for i in _handler_ids):
        return

    settings = get_settings()
    log_level = _resolve_level(settings.log_level, settings.debug)
    json_format = settings.log_format.lower() == "json"

    logger.remove()
    _handler_ids.clear()

    if json_format:
        _handler_ids.append(
            logger.add(
                sys.stdout,
                format=serialize_log_record,
                level=log_level,
                colorize=False,
            )
        )
    else:

        def filter_reloader_logs(record):
            """Filter out logs from __main__ and __mp_main__ (reloader processes)."""
            return record.get("name", "") not in ("__main__", "__mp_main__")

        _handler_ids.append(
            logger.add(
                sys.stdout,
                colorize=True,
                format=CONSOLE_FORMAT,
                level=log_level,
                filter=filter_reloader_logs,
            )
        )

    if settings.log_file_enabled:
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)
        suffix = ".json.log" if json_format else ".log"
        file_format = serialize_log_record if json_format else FILE_FORMAT

        for name, level in (("app", "DEBUG"), ("error", "ERROR")):
            _handler_ids.append(
                logger.add(
                    log_dir / f"{name}{suffix}",
                    rotation="100 MB",
                    retention="30 days",
                    compression="zip",
                    format=file_format,
                    level=level,
                    colorize=False,
                )
            )

    intercept_standard_logging()
    configure_third_party_loggers()


# Configure logger on module import
setup_logger()

__all__ = [
    "logger",
    "format_exception_short",
    "configure_third_party_loggers",
    "intercept_standard_logging",
    "serialize_log_record",
    "setup_logger",
    "InterceptHandler",
]
