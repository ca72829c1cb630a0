"""Typed access to the environment variables that drive benchmark defaults.

Usage:
    from crawlbench.utils.env import get_env

    url = get_env("BENCHMARK_URL", default="https://example.com")
    max_pages = get_env("BENCHMARK_MAX_PAGES", default=10, as_type=int)
    headless = get_env("PLAYWRIGHT_HEADLESS", default=True, as_type=bool)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

_FALSE_STRINGS = ("false", "0", "no", "off")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when a variable's value cannot be coerced to the requested type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(
            f"Environment variable {name}='{value}' is not a valid "
            f"{expected_type.__name__}"
        )


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a raw environment string to ``as_type``.

    Raises:
        EnvVarTypeError: If the conversion fails.
    """
    try:
        if as_type is bool:
            return value.strip().lower() not in _FALSE_STRINGS
        if as_type is int:
            return int(value.strip())
        if as_type is str:
            return value
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None) -> None:
    from crawlbench.utils.logger import Logger

    if Logger.is_configured():
        Logger.get("env").debug(f"ENV GET {name}={value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Read an environment variable, optionally coercing its type.

    Unset and blank variables both resolve to ``default``, so an empty
    ``BENCHMARK_MAX_PAGES=`` in a ``.env`` file behaves like an absent one.

    Args:
        name: Variable name.
        default: Value returned when the variable is unset or blank.
        as_type: ``bool``, ``int`` or ``str``; any other type is called
            with the raw string. Booleans treat "false", "0", "no" and "off"
            as False.
        log: Emit a DEBUG line through the crawlbench logger when it is
            configured.

    Raises:
        EnvVarTypeError: If ``as_type`` is given and the value does not parse.
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None or value.strip() == "":
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value
