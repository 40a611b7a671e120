"""Configuration: frozen Config with environment loading and context scoping."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from until.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

ENV_LOG_FAILURES = "UNTIL_LOG_FAILURES"
ENV_LOG_LEVEL = "UNTIL_LOG_LEVEL"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class Config:
    """Immutable configuration for the adapters.

    Configuration only affects diagnostics; it never changes what an adapter
    returns.

    Example:
        with use_config(Config(log_failures=True, log_level="warning")):
            value, error = await until(fetch())
    """

    #: Emit one log record per captured failure.
    log_failures: bool = False
    #: Accepts a ``logging`` level number or name (case-insensitive).
    log_level: int | str = logging.DEBUG

    def __post_init__(self) -> None:
        """Normalize the log level to its numeric form."""
        object.__setattr__(self, "log_level", _coerce_level(self.log_level))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from ``UNTIL_*`` environment variables.

        A ``.env`` file found from the working directory upwards is loaded
        first (without overriding variables already set) unless an explicit
        *environ* mapping is given.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True), override=False)
            environ = os.environ

        kwargs: dict[str, bool | str] = {}
        raw_failures = environ.get(ENV_LOG_FAILURES)
        if raw_failures is not None:
            kwargs["log_failures"] = _parse_bool(ENV_LOG_FAILURES, raw_failures)
        raw_level = environ.get(ENV_LOG_LEVEL)
        if raw_level is not None and raw_level.strip():
            kwargs["log_level"] = raw_level
        return cls(**kwargs)  # type: ignore[arg-type]


def _coerce_level(value: int | str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(
            f"log_level must be a level name or number, got {value!r}",
            hint="Use a logging level such as 'DEBUG' or logging.WARNING.",
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        name = value.strip().upper()
        if name.isdigit():
            return int(name)
        level = logging.getLevelNamesMapping().get(name)
        if level is not None:
            return level
    raise ConfigurationError(
        f"Unknown log level: {value!r}",
        hint="Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
    )


def _parse_bool(key: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ConfigurationError(
        f"{key} must be a boolean, got {raw!r}",
        hint="Use 1/0, true/false, yes/no or on/off.",
    )


# --- Ambient scope ---

_active_config: ContextVar[Config | None] = ContextVar("until_config", default=None)
_DEFAULT_CONFIG = Config()


def get_config() -> Config:
    """Return the config active in the current context."""
    cfg = _active_config.get()
    return cfg if cfg is not None else _DEFAULT_CONFIG


@contextmanager
def use_config(config: Config) -> Iterator[Config]:
    """Activate *config* for the current context and its child tasks."""
    if not isinstance(config, Config):
        raise ConfigurationError(
            f"use_config() expects a Config, got {type(config).__name__}",
            hint="Build one with Config(...) or Config.from_env().",
        )
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)
