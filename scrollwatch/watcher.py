"""Long-lived consumption loop for a debounced observer."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Generic, TypeVar

from .observer import DebouncedValueObserver

LOG = logging.getLogger(__name__)

T = TypeVar("T")

SettledHandler = Callable[[T], Awaitable[None] | None]


class SettledValueWatcher(Generic[T]):
    """Applies each settled value from an observer to a handler.

    Call :meth:`start` whenever the owning view becomes active. Starting again
    subscribes afresh, which ends the previous loop through end-of-stream.
    """

    def __init__(self, observer: DebouncedValueObserver[T], handler: SettledHandler[T]) -> None:
        self._observer = observer
        self._handler = handler
        self._task: asyncio.Task[None] | None = None
        self._delivered = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def delivered(self) -> int:
        """Number of settled values handed to the handler so far."""

        return self._delivered

    def start(self) -> asyncio.Task[None]:
        """Subscribe and consume on the running loop, superseding any previous loop."""

        stream = self._observer.subscribe()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._consume(stream))
        return self._task

    async def stop(self) -> None:
        """Cancel the consumption loop and wait for it to finish."""

        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _consume(self, stream: AsyncIterator[T]) -> None:
        async for value in stream:
            self._delivered += 1
            try:
                result = self._handler(value)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                LOG.exception("Settled value handler failed", extra={"value": value})
        LOG.debug("Consumption loop ended")


__all__ = ["SettledHandler", "SettledValueWatcher"]
