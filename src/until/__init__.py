"""until: report an awaitable's outcome as data instead of raising.

Public API:
    - until(): Await and return ``(value, None)`` or ``(None, error)``
    - settle(): Await and return ``Ok(value)`` or ``Err(error)``
    - until_future(): Outcome tuple future via a done-callback on a Future/Task
    - Config / use_config(): Diagnostics configuration
"""

from __future__ import annotations

import logging

from until.adapter import settle, until, until_future
from until.config import Config, get_config, use_config
from until.errors import (
    ConfigurationError,
    NotAwaitableError,
    UntilError,
    UnwrapError,
)
from until.outcome import Err, Ok, Outcome, ResultTuple

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("until-async")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("until").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Err",
    "NotAwaitableError",
    "Ok",
    "Outcome",
    "ResultTuple",
    "UntilError",
    "UnwrapError",
    "get_config",
    "settle",
    "until",
    "until_future",
    "use_config",
]
