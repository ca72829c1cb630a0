"""Shared helpers: environment access and logging."""

from crawlbench.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from crawlbench.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]
