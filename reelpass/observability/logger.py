"""Structured logging for ReelPass, driven by the ``logging`` config section."""

import logging
import sys
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import Field, field_validator
from structlog.types import EventDict, Processor

from .. import __version__
from ..core.models.base import FrozenSchema

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class LoggingConfig(FrozenSchema):
    """The ``logging`` section of the loaded configuration."""

    level: LogLevel = Field("INFO", description="Threshold for both handlers")
    format: LogFormat = Field("console", description="Renderer for log lines")
    file: Path | None = Field(None, description="Also write log lines to this file")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any] | None,
        level: str | None = None,
        fmt: str | None = None,
    ) -> "LoggingConfig":
        """Read the ``logging`` section; explicit arguments win over it."""
        section = dict((config or {}).get("logging") or {})
        if level:
            section["level"] = level
        if fmt:
            section["format"] = fmt
        return cls.model_validate(section)


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp every entry with the application name and version."""
    event_dict["app"] = "reelpass"
    event_dict["version"] = __version__
    return event_dict


def _renderer_chain(fmt: LogFormat) -> list[Processor]:
    if fmt == "console":
        return [
            structlog.processors.ExceptionPrettyPrinter(),
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(config: LoggingConfig) -> None:
    """Apply a logging configuration to structlog and the stdlib root logger.

    Safe to call repeatedly; each call replaces the root handlers. Log lines
    always go to stderr so ``reelpass score --json`` keeps stdout parseable.

    Args:
        config: Validated ``logging`` section
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            add_app_context,
            *_renderer_chain(config.format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, config.level),
        handlers=handlers,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger, e.g. ``get_logger(__name__)``."""
    return structlog.get_logger(name)


# Library callers get warnings only until the CLI applies the loaded config
configure_logging(LoggingConfig(level="WARNING"))
