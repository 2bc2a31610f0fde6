"""Bridge from synchronous writes to a debounced async stream."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

from .channel import LatestValueChannel
from .config import ObserverConfig
from .debounce import debounce

LOG = logging.getLogger(__name__)

T = TypeVar("T")


class DebouncedValueObserver(Generic[T]):
    """Coalesces bursts of writes into a debounced trickle of notifications.

    Producers call :meth:`write` (or assign :attr:`position`) as often as they
    like; it never blocks. A consumer calls :meth:`subscribe` and iterates the
    returned sequence, which yields a value only after no newer write arrived for
    ``debounce_interval`` seconds. Only one subscription is live at a time: a new
    ``subscribe()`` ends the previous sequence before opening the next one.
    """

    def __init__(self, debounce_interval: float, *, flush_on_close: bool = False) -> None:
        if debounce_interval < 0:
            raise ValueError(f"Debounce interval must be >= 0, got {debounce_interval}")
        self._debounce_interval = debounce_interval
        self._flush_on_close = flush_on_close
        self._channel: LatestValueChannel[T] | None = None
        self.current_value: T | None = None

    @classmethod
    def from_config(cls, config: ObserverConfig) -> DebouncedValueObserver[T]:
        return cls(config.debounce_seconds, flush_on_close=config.flush_on_close)

    @property
    def debounce_interval(self) -> float:
        return self._debounce_interval

    @property
    def flush_on_close(self) -> bool:
        return self._flush_on_close

    @property
    def subscribed(self) -> bool:
        """Whether a delivery channel is currently open."""

        return self._channel is not None and not self._channel.closed

    def write(self, value: T) -> None:
        """Cache ``value`` and hand it to the active subscription, if any."""

        self.current_value = value
        if self._channel is not None:
            self._channel.send(value)

    def subscribe(self) -> AsyncIterator[T]:
        """Return a fresh debounced sequence, ending any previous one."""

        if self._channel is not None:
            LOG.debug("Superseding previous subscription")
            self._channel.close()
        self._channel = LatestValueChannel()
        LOG.debug("Opened subscription", extra={"debounce_interval": self._debounce_interval})
        return debounce(self._channel, self._debounce_interval, flush_on_close=self._flush_on_close)

    def close(self) -> None:
        """End the active subscription; later writes only update the cache."""

        if self._channel is None:
            return
        self._channel.close()
        self._channel = None
        LOG.debug("Closed subscription")

    @property
    def position(self) -> None:
        """Write-only binding; reads always return ``None``."""

        return None

    @position.setter
    def position(self, value: T | None) -> None:
        if value is None:
            return
        self.write(value)

    def setter(self) -> Callable[[T | None], None]:
        """Return the write-only binding as a plain callback."""

        def _set(value: T | None) -> None:
            self.position = value

        return _set


__all__ = ["DebouncedValueObserver"]
