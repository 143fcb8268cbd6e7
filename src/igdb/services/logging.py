"""Logging setup for applications embedding the IGDB client.

The library itself only emits structlog events; nothing is configured on
import. Applications call ``setup_logging`` once at startup to route those
events to the console and, optionally, to rotating log files.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, TextIO

import structlog

SHARED_PROCESSORS: tuple[Any, ...] = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
)

MAIN_LOG = ("igdb.log", 10 * 1024 * 1024, 5)
ERROR_LOG = ("error.log", 5 * 1024 * 1024, 3)


class LoggingService:
    """Routes structlog events through stdlib handlers."""

    def __init__(
        self,
        log_level: str = "INFO",
        log_dir: Path | None = None,
        environment: str | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the logging service.

        Args:
            log_level: The minimum log level to capture
            log_dir: Directory for rotating log files (None for console only)
            environment: ``development`` or ``production``; read from the
                ``ENVIRONMENT`` variable when omitted
            stream: Console stream (stderr by default)
        """
        self.log_level = log_level.upper()
        self.log_dir = log_dir
        self.stream = stream or sys.stderr
        self.environment = environment or os.getenv("ENVIRONMENT", "development")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping().get(self.log_level, logging.INFO)

    def configure(self) -> None:
        """Install the handlers on the root logger and configure structlog."""
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(self.level)

        root.addHandler(self._handler(logging.StreamHandler(self.stream), self.level))
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            root.addHandler(self._rotating(self.log_dir, MAIN_LOG, self.level))
            root.addHandler(self._rotating(self.log_dir, ERROR_LOG, logging.ERROR))

        structlog.configure(
            processors=[*SHARED_PROCESSORS, self._renderer()],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def get_logger(self, name: str | None = None) -> structlog.stdlib.BoundLogger:
        return structlog.stdlib.get_logger(name)

    def _renderer(self) -> Any:
        # Log files always get JSON lines.
        if self.is_development and self.log_dir is None:
            return structlog.dev.ConsoleRenderer(colors=self.stream.isatty())
        return structlog.processors.JSONRenderer()

    def _rotating(self, log_dir: Path, target: tuple[str, int, int], level: int) -> logging.Handler:
        filename, max_bytes, backup_count = target
        handler = logging.handlers.RotatingFileHandler(
            log_dir / filename,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        return self._handler(handler, level)

    @staticmethod
    def _handler(handler: logging.Handler, level: int) -> logging.Handler:
        # structlog renders the whole line.
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> LoggingService:
    """Set up logging for the client and return the configured service."""
    service = LoggingService(log_level=log_level, log_dir=log_dir, environment=environment, stream=stream)
    service.configure()
    return service
