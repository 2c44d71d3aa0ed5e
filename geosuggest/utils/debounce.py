"""Debounced invocation on top of the running asyncio loop."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Generic, TypeVar

from geosuggest.logging import logger

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Run ``fn`` once input has been quiet for ``delay_ms``.

    Each call replaces the previously armed call, so a burst collapses into a
    single invocation carrying the last argument. A call that has already
    fired is never cancelled by a later one. If ``fn`` returns an awaitable it
    is awaited inside the timer task.
    """

    def __init__(self, fn: Callable[[T], Any], delay_ms: int) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        self._fn = fn
        self._delay = delay_ms / 1000
        self._pending: asyncio.Task[None] | None = None
        self._running: set[asyncio.Task[None]] = set()
        self._closed = False

    @property
    def delay_ms(self) -> int:
        return round(self._delay * 1000)

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    @property
    def closed(self) -> bool:
        return self._closed

    def __call__(self, arg: T) -> None:
        if self._closed:
            logger.debug("debounced_call_after_close", fn=_name_of(self._fn))
            return
        self.cancel()
        task = asyncio.get_running_loop().create_task(self._fire_later(arg))
        self._pending = task
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    def cancel(self) -> None:
        """Drop the armed call, if any. Calls already firing are left alone."""

        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    def close(self) -> None:
        self.cancel()
        self._closed = True

    async def join(self) -> None:
        """Wait until the armed call and any call still running have finished."""

        while self._running:
            await asyncio.gather(*self._running, return_exceptions=True)

    async def _fire_later(self, arg: T) -> None:
        await asyncio.sleep(self._delay)
        # From here on the call counts as fired.
        if self._pending is asyncio.current_task():
            self._pending = None
        try:
            result = self._fn(arg)
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            logger.error(
                "debounced_call_failed",
                fn=_name_of(self._fn),
                error=str(exc),
                exc_info=True,
            )


def debounce(fn: Callable[[T], Any], delay_ms: int) -> Debouncer[T]:
    """Wrap ``fn`` in a :class:`Debouncer` firing after ``delay_ms`` of quiet."""

    return Debouncer(fn, delay_ms)


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


__all__ = ["Debouncer", "debounce"]
