"""Single-slot mailbox that keeps only the newest value."""

from __future__ import annotations

import asyncio
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class ChannelClosed(Exception):
    """Raised by ``receive`` once the channel is closed and drained."""


class LatestValueChannel(Generic[T]):
    """Capacity-one channel; a send overwrites any value not yet received."""

    def __init__(self) -> None:
        self._value: object = _EMPTY
        self._closed = False
        self._ready = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, value: T) -> bool:
        """Store ``value`` without blocking; returns False once closed."""

        if self._closed:
            return False
        self._value = value
        self._ready.set()
        return True

    def close(self) -> None:
        """Close the channel and wake the receiver. A buffered value stays readable."""

        if self._closed:
            return
        self._closed = True
        self._ready.set()

    async def receive(self) -> T:
        """Wait for the next value, raising ``ChannelClosed`` when drained."""

        while self._value is _EMPTY:
            if self._closed:
                raise ChannelClosed
            self._ready.clear()
            await self._ready.wait()
        # no await between the check and the take, so cancellation never loses a value
        value = self._value
        self._value = _EMPTY
        return value  # type: ignore[return-value]

    def __aiter__(self) -> LatestValueChannel[T]:
        return self

    async def __anext__(self) -> T:
        try:
            return await self.receive()
        except ChannelClosed:
            raise StopAsyncIteration from None


__all__ = ["ChannelClosed", "LatestValueChannel"]
