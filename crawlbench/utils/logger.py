"""Process-wide logging facade for crawlbench.

The CLI configures it once at startup; library code asks for named child
loggers afterwards:

    from crawlbench.utils.logger import Logger

    Logger.configure(level="INFO")
    log = Logger.get("benchmark.runner")
    log.info("[PLAYWRIGHT] Starting iteration 1/3")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels accepted by ``Logger.configure``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to the numeric stdlib logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when a logger is requested before ``Logger.configure()``."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() before logging."
        )


class Logger:
    """Configure-once access point for ``crawlbench.*`` loggers.

    ``get`` refuses to hand out loggers until ``configure`` has run, so a
    benchmark never silently drops its progress output.
    """

    _configured: bool = False
    _root_name: str = "crawlbench"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
    ) -> None:
        """Install a single handler on the ``crawlbench`` root logger.

        Args:
            level: Level name or LogLevel.
            output: None for stdout, "stderr", a file path, or any stream.
            timestamps: Prefix each line with the time.

        Raises:
            ValueError: If ``output`` is not a supported target.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        root = logging.getLogger(cls._root_name)
        root.setLevel(level.to_logging_level())

        for old in root.handlers[:]:
            root.removeHandler(old)
            old.close()

        handler: logging.Handler
        if output is None:
            handler = logging.StreamHandler(sys.stdout)
        elif output == "stderr":
            handler = logging.StreamHandler(sys.stderr)
        elif isinstance(output, str | Path):
            handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        handler.setLevel(level.to_logging_level())
        fmt = "%(levelname)s [%(name)s] %(message)s"
        if timestamps:
            fmt = "%(asctime)s " + fmt
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
        root.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Return ``crawlbench.<name>`` (or the root logger when name is None).

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()
        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change the level of the root logger and its handlers."""
        if not cls._configured:
            raise LoggerNotConfiguredError()
        if isinstance(level, str):
            level = LogLevel(level.upper())

        root = logging.getLogger(cls._root_name)
        root.setLevel(level.to_logging_level())
        for handler in root.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if configure() has been called."""
        return cls._configured

    @classmethod
    def ensure_configured(cls, level: str | LogLevel = "INFO") -> None:
        """Configure with defaults unless something already did.

        Library entry points (the runner, the providers) call this so they
        can be driven from plain scripts and tests without the CLI.
        """
        if not cls._configured:
            cls.configure(level=level, output="stderr", timestamps=True)
