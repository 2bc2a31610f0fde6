"""Tests for the debounce transform."""

from __future__ import annotations

import asyncio

import pytest

from scrollwatch.channel import LatestValueChannel
from scrollwatch.debounce import debounce


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


async def _collect(stream) -> list[object]:  # type: ignore[no-untyped-def]
    return [value async for value in stream]


@pytest.mark.anyio
async def test_burst_yields_only_last_value() -> None:
    channel: LatestValueChannel[int] = LatestValueChannel()
    collector = asyncio.create_task(_collect(debounce(channel, 0.05)))
    await asyncio.sleep(0)

    for value in range(5):
        channel.send(value)
        await asyncio.sleep(0.01)
    await asyncio.sleep(0.15)
    channel.close()

    assert await asyncio.wait_for(collector, 1) == [4]


@pytest.mark.anyio
async def test_unsettled_value_dropped_on_close() -> None:
    channel: LatestValueChannel[int] = LatestValueChannel()
    collector = asyncio.create_task(_collect(debounce(channel, 0.5)))
    await asyncio.sleep(0)

    channel.send(1)
    await asyncio.sleep(0.01)
    channel.close()

    assert await asyncio.wait_for(collector, 1) == []


@pytest.mark.anyio
async def test_unsettled_value_flushed_when_requested() -> None:
    channel: LatestValueChannel[int] = LatestValueChannel()
    collector = asyncio.create_task(_collect(debounce(channel, 0.5, flush_on_close=True)))
    await asyncio.sleep(0)

    channel.send(1)
    await asyncio.sleep(0.01)
    channel.close()

    assert await asyncio.wait_for(collector, 1) == [1]


@pytest.mark.anyio
async def test_zero_interval_passes_values_through() -> None:
    channel: LatestValueChannel[str] = LatestValueChannel()
    collector = asyncio.create_task(_collect(debounce(channel, 0)))
    await asyncio.sleep(0)

    channel.send("a")
    await asyncio.sleep(0.02)
    channel.send("b")
    await asyncio.sleep(0.02)
    channel.close()

    assert await asyncio.wait_for(collector, 1) == ["a", "b"]


@pytest.mark.anyio
async def test_negative_interval_rejected() -> None:
    channel: LatestValueChannel[int] = LatestValueChannel()

    with pytest.raises(ValueError):
        await _collect(debounce(channel, -1))
