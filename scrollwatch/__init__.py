"""Debounced value observer bridging synchronous writes to async streams."""

from __future__ import annotations

from .channel import ChannelClosed, LatestValueChannel
from .config import AppConfig, ObserverConfig, load_config, save_config
from .debounce import debounce
from .logs import configure_logging
from .observer import DebouncedValueObserver
from .progress import progress_fraction
from .watcher import SettledValueWatcher

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "ChannelClosed",
    "DebouncedValueObserver",
    "LatestValueChannel",
    "ObserverConfig",
    "SettledValueWatcher",
    "configure_logging",
    "debounce",
    "load_config",
    "progress_fraction",
    "save_config",
]
