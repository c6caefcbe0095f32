"""Completion-callback support for coroutine operations.

Every client operation is written once, as a coroutine. ``callback_compatible``
lets callers choose how they are told about completion:

    # Awaitable
    info = await client.info()

    # Error-first callback, invoked as callback(error, result)
    client.info(callback=lambda err, info: ...)

With a callback and a running event loop the coroutine is scheduled as a
task and the task is returned. With a callback and no running loop the call
blocks until the operation has finished and the callback has been invoked.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

Callback = Callable[[BaseException | None, Any], Any]


def deliver(
    coro: Coroutine[Any, Any, Any],
    callback: Callback,
    *,
    cleanup: Callable[[], Awaitable[None]] | None = None,
) -> asyncio.Task | None:
    """Run ``coro`` and report its outcome to ``callback``.

    Args:
        coro: Operation to run
        callback: Called once with ``(None, result)`` or ``(error, None)``
        cleanup: Awaited after ``coro`` when a private event loop is used,
            so resources bound to that loop are released before it closes

    Returns:
        The scheduled task when called from a running loop, otherwise None
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return _deliver_blocking(coro, callback, cleanup)

    task = loop.create_task(coro)
    task.add_done_callback(functools.partial(_notify, callback))
    return task


def _notify(callback: Callback, task: asyncio.Task) -> None:
    if task.cancelled():
        callback(asyncio.CancelledError(), None)
        return
    error = task.exception()
    if error is not None:
        callback(error, None)
    else:
        callback(None, task.result())


def _deliver_blocking(
    coro: Coroutine[Any, Any, Any],
    callback: Callback,
    cleanup: Callable[[], Awaitable[None]] | None,
) -> None:
    async def run() -> Any:
        try:
            return await coro
        finally:
            if cleanup is not None:
                await cleanup()

    try:
        result = asyncio.run(run())
    except Exception as e:
        callback(e, None)
        return None
    callback(None, result)
    return None


def callback_compatible(method: Callable[..., Coroutine[Any, Any, Any]]) -> Callable[..., Any]:
    """Give a coroutine method an optional keyword-only ``callback``.

    Without a callback the wrapped method returns the coroutine unchanged,
    ready to be awaited. The owning object must provide an async ``close()``,
    used as cleanup when the call blocks on a private event loop.
    """

    @functools.wraps(method)
    def wrapper(self: Any, *args: Any, callback: Callback | None = None, **kwargs: Any) -> Any:
        if callback is not None and not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        coro = method(self, *args, **kwargs)
        if callback is None:
            return coro
        return deliver(coro, callback, cleanup=self.close)

    return wrapper
