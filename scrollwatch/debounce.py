"""Async debounce helpers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import Any, TypeVar

from .channel import ChannelClosed, LatestValueChannel

LOG = logging.getLogger(__name__)

T = TypeVar("T")

_NOTHING = object()


async def debounce(
    source: LatestValueChannel[T],
    interval: float,
    *,
    flush_on_close: bool = False,
) -> AsyncIterator[T]:
    """Yield values from ``source`` once they have been stable for ``interval`` seconds.

    Every received value replaces the pending one and restarts the quiet period,
    so only settled values come out. When ``source`` closes, a pending value whose
    quiet period already elapsed is still yielded; one still inside its quiet
    period is dropped unless ``flush_on_close`` is set.
    """

    if interval < 0:
        raise ValueError(f"Debounce interval must be >= 0, got {interval}")

    loop = asyncio.get_running_loop()
    pending: Any = _NOTHING
    deadline = 0.0
    while True:
        try:
            if pending is _NOTHING:
                value = await source.receive()
            else:
                remaining = deadline - loop.time()
                if remaining <= 0:
                    settled, pending = pending, _NOTHING
                    yield settled
                    continue
                value = await asyncio.wait_for(source.receive(), remaining)
        except TimeoutError:
            settled, pending = pending, _NOTHING
            yield settled
            continue
        except ChannelClosed:
            if pending is not _NOTHING:
                if flush_on_close or loop.time() >= deadline:
                    yield pending
                else:
                    LOG.debug("Dropping unsettled value on close", extra={"value": pending})
            return
        pending = value
        deadline = loop.time() + interval


__all__ = ["debounce"]
