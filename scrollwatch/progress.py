"""Derived state helpers for settled scroll positions."""

from __future__ import annotations


def progress_fraction(position: float, total: float) -> float:
    """Fraction of ``total`` reached at ``position``, clamped to ``[0, 1]``."""

    if total <= 0:
        return 0.0
    return min(max(position / total, 0.0), 1.0)


__all__ = ["progress_fraction"]
