"""Adapters that report an awaitable's outcome as data instead of raising.

Contract shared by every entry point:

- Success with ``v`` reports ``(v, None)`` / ``Ok(v)``.
- Failure with an ``Exception`` ``e`` reports ``(None, e)`` / ``Err(e)``,
  with ``e`` passed through as the very same object.
- The adapter itself never fails because the input failed. Cancellation and
  other non-``Exception`` control flow (``KeyboardInterrupt``,
  ``SystemExit``) propagate unchanged.
- Handing in something that cannot be awaited is misuse and raises
  ``NotAwaitableError``.
"""

from __future__ import annotations

import asyncio
from contextlib import suppress
import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from until.config import get_config
from until.errors import NotAwaitableError
from until.outcome import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from until.config import Config
    from until.outcome import Outcome, ResultTuple

log = logging.getLogger(__name__)

T = TypeVar("T")


async def until(
    awaitable: Awaitable[T], *, config: Config | None = None
) -> ResultTuple[T]:
    """Await *awaitable* and return ``(value, None)`` or ``(None, error)``.

    Args:
        awaitable: An in-flight awaitable (coroutine, Task, Future, ...).
        config: Optional config; defaults to the one active in this context.

    Returns:
        A two-slot tuple where exactly one slot carries data. A success whose
        value is ``None`` also reads ``(None, None)``; use ``settle()`` when
        that case must be told apart.

    Example:
        user, err = await until(fetch_user(42))
        if err is not None:
            ...
    """
    outcome = await settle(awaitable, config=config)
    return outcome.as_tuple()


async def settle(
    awaitable: Awaitable[T], *, config: Config | None = None
) -> Outcome[T]:
    """Await *awaitable* and return ``Ok(value)`` or ``Err(error)``."""
    _require_awaitable(awaitable)
    try:
        value = await awaitable
    except Exception as exc:
        _log_failure(exc, config)
        return Err(exc)
    return Ok(value)


def until_future(
    future: asyncio.Future[T], *, config: Config | None = None
) -> asyncio.Future[ResultTuple[T]]:
    """Return a future that always resolves with the outcome of *future*.

    A single done-callback is registered on *future*; no task is created and
    the underlying work is never started by this call. If *future* is
    cancelled the returned future is cancelled too. Cancelling the returned
    future leaves *future* alone.
    """
    if not asyncio.isfuture(future):
        raise NotAwaitableError(
            "until_future() expects an asyncio Future or Task, "
            f"got {type(future).__name__}",
            hint=(
                "Await coroutines with until(), or schedule them with "
                "asyncio.ensure_future() first. Wrap concurrent.futures.Future "
                "objects with asyncio.wrap_future()."
            ),
        )
    cfg = config if config is not None else get_config()
    result: asyncio.Future[ResultTuple[T]] = future.get_loop().create_future()

    def _on_done(source: asyncio.Future[T]) -> None:
        if source.cancelled():
            if not result.done():
                result.cancel()
            return
        # Reading the exception marks it retrieved even if nobody awaits result.
        exc = source.exception()
        if result.done():
            return
        if exc is None:
            result.set_result(Ok(source.result()).as_tuple())
        elif isinstance(exc, Exception):
            result.set_result(Err(exc).as_tuple())
            _log_failure(exc, cfg)
        else:
            result.set_exception(exc)

    future.add_done_callback(_on_done)
    return result


def _require_awaitable(obj: Any) -> None:
    if not inspect.isawaitable(obj):
        hint = None
        if inspect.iscoroutinefunction(obj):
            hint = "Call the coroutine function first: until(fn(...)), not until(fn)."
        raise NotAwaitableError(
            f"Expected an awaitable, got {type(obj).__name__}", hint=hint
        )


def _log_failure(exc: Exception, config: Config | None) -> None:
    cfg = config if config is not None else get_config()
    if not cfg.log_failures:
        return
    # Diagnostics never change the reported outcome.
    with suppress(Exception):
        log.log(
            int(cfg.log_level),
            "Awaitable settled with failure: %s: %s",
            type(exc).__name__,
            exc,
        )
