"""Loguru-based structured logging configuration with trace ID support."""

import json
import logging
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from types import FrameType
from typing import TYPE_CHECKING, Any

from loguru import logger

from .trace_id import NO_TRACE, get_formatted_trace_id

if TYPE_CHECKING:
    from loguru import Logger, Record

    from ..config import RegistrySettings
else:
    Logger = type(logger)
    Record = dict[str, Any]


class LogFormat(str, Enum):
    """Available log format options."""

    JSON = "json"
    PRETTY = "pretty"
    COMPACT = "compact"
    DETAILED = "detailed"


def trace_id_patcher(record: Record) -> None:
    """Patch log record with trace ID and the trace ID of any attached exception."""
    record["extra"]["trace_id"] = get_formatted_trace_id()

    exc_info = record.get("exception")
    if exc_info and exc_info.value and exc_info.type:
        exception_trace_id = getattr(exc_info.value, "trace_id", None)
        if exception_trace_id and exception_trace_id != NO_TRACE:
            record["extra"]["exception_trace_id"] = exception_trace_id


def _json_entry(record: Record) -> dict[str, Any]:
    log_entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        "message": record["message"],
        "trace_id": record["extra"].get("trace_id", NO_TRACE),
        "process": record["process"].id,
        "thread": record["thread"].id,
    }

    for key, value in record["extra"].items():
        if key not in ("trace_id", "serialized"):
            log_entry[key] = value

    exc_info = record.get("exception")
    if exc_info and exc_info.value and exc_info.type:
        exception_info: dict[str, Any] = {
            "type": exc_info.type.__name__,
            "value": str(exc_info.value),
        }
        # CoreError carries these
        for attr in ("trace_id", "error_code", "details"):
            value = getattr(exc_info.value, attr, None)
            if value is not None:
                exception_info["exception_trace_id" if attr == "trace_id" else attr] = value

        log_entry["exception"] = exception_info

    return log_entry


def get_formatter(format_type: LogFormat) -> str | Callable[[Record], str]:
    """Get formatter based on format type.

    Text formats are loguru templates. The JSON formatter serializes the record
    into ``extra["serialized"]`` and returns a template that emits it verbatim.
    """
    if format_type == LogFormat.PRETTY:
        return (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<yellow>{extra[trace_id]}</yellow> | "
            "<level>{message}</level>"
        )

    elif format_type == LogFormat.COMPACT:
        return "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"

    elif format_type == LogFormat.DETAILED:
        return (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<blue>{process}</blue>:<blue>{thread}</blue> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<yellow>{extra[trace_id]}</yellow> | "
            "<level>{message}</level>\n{exception}"
        )

    def json_formatter(record: Record) -> str:
        """Format record as JSON."""
        record["extra"]["serialized"] = json.dumps(_json_entry(record), ensure_ascii=False, default=str)
        return "{extra[serialized]}\n"

    return json_formatter


def setup_logging(
    level: str = "INFO",
    enable_console: bool = True,
    enable_file: bool = False,
    log_file: str | Path | None = None,
    app_name: str | None = None,
    environment: str | None = None,
    additional_fields: dict[str, Any] | None = None,
    console_format: LogFormat = LogFormat.PRETTY,
    file_format: LogFormat = LogFormat.JSON,
    enqueue: bool = True,
) -> None:
    """Setup Loguru-based structured logging with trace ID support.

    Removes any existing handlers, installs console and file handlers as
    requested, patches every record with the active trace ID and redirects
    standard library logging into loguru.
    """
    logger.remove()

    extra_fields: dict[str, Any] = {}
    if app_name:
        extra_fields["app"] = app_name
    if environment:
        extra_fields["environment"] = environment
    if additional_fields:
        extra_fields.update(additional_fields)

    def add_extra_fields(record: Record) -> bool:
        record["extra"].update(extra_fields)
        return True

    if enable_console:
        logger.add(
            sys.stdout,
            format=get_formatter(console_format),
            level=level,
            colorize=console_format != LogFormat.JSON,
            enqueue=enqueue,
            backtrace=True,
            diagnose=False,
            filter=add_extra_fields,
        )

    if enable_file:
        log_file = Path("logs/asset-registry.log") if log_file is None else Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=get_formatter(file_format),
            level=level,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            enqueue=enqueue,
            backtrace=True,
            diagnose=False,
            filter=add_extra_fields,
        )

    logger.configure(patcher=trace_id_patcher)

    class InterceptHandler(logging.Handler):
        """Intercept standard library logging and redirect to Loguru."""

        def emit(self, record: logging.LogRecord) -> None:
            try:
                level_name: str | int = logger.level(record.levelname).name
            except ValueError:
                level_name = record.levelno

            frame: FrameType | None = logging.currentframe()
            depth = 2
            while frame and frame.f_code.co_filename == logging.__file__:
                frame = frame.f_back
                depth += 1

            logger.opt(depth=depth, exception=record.exc_info).log(level_name, record.getMessage())

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    configure_third_party_logging()


def configure_logging(settings: "RegistrySettings", *, enqueue: bool = True) -> None:
    """Apply the logging section of registry settings."""
    setup_logging(
        level=settings.log_level,
        enable_console=True,
        enable_file=settings.log_file is not None,
        log_file=settings.log_file,
        app_name=settings.app_name,
        environment=settings.environment,
        console_format=LogFormat(settings.log_format),
        enqueue=enqueue,
    )


def get_logger(_: str, **kwargs: Any) -> "Logger":
    """Get a Loguru logger with optional extra fields."""
    if kwargs:
        return logger.bind(**kwargs)

    return logger


def log_exception_with_context(exc: Exception, level: str = "ERROR", message: str | None = None, **kwargs: Any) -> None:
    """Log an exception with full context and trace ID information."""
    from ..exceptions import CoreError

    log_message = message or f"Exception occurred: {exc}"

    extra_context = kwargs.copy()
    extra_context["exception_type"] = exc.__class__.__name__

    if isinstance(exc, CoreError):
        extra_context["error_code"] = exc.error_code
        extra_context["exception_trace_id"] = exc.trace_id
        extra_context.update(exc.details)

    logger.bind(**extra_context).log(level, log_message)


def configure_third_party_logging() -> None:
    """Configure third-party library logging levels to reduce noise."""
    third_party_loggers = {
        "asyncio": logging.WARNING,
        "pydantic": logging.WARNING,
    }

    for logger_name, level in third_party_loggers.items():
        logging.getLogger(logger_name).setLevel(level)
