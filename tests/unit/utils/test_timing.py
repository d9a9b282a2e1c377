"""Unit tests for timing utilities."""
import asyncio
import logging

import pytest

from metrics_forwarder.utils.timing import async_timed, parse_duration, ticker


@pytest.mark.parametrize("value, expected", [
    ("0", 0.0),
    ("30s", 30.0),
    ("5m", 300.0),
    ("1h30m", 5400.0),
    ("1.5h", 5400.0),
    ("250ms", 0.25),
    ("1m0.5s", 60.5),
    ("+10s", 10.0),
])
def test_parse_duration(value, expected):
    """Test parsing valid duration strings."""
    assert parse_duration(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", ["", "10", "s", "1x", "1h 30m", "-", "."])
def test_parse_duration_invalid(value):
    """Test that malformed durations are rejected."""
    with pytest.raises(ValueError):
        parse_duration(value)


@pytest.mark.asyncio
async def test_ticker_zero_period_ticks_once():
    """Test that a zero period yields exactly one tick."""
    ticks = [tick async for tick in ticker(0)]

    assert len(ticks) == 1


@pytest.mark.asyncio
async def test_ticker_periodic_first_tick_is_immediate():
    """Test that the first periodic tick does not wait."""
    loop = asyncio.get_running_loop()
    start = loop.time()
    ticks = ticker(60)

    await ticks.__anext__()

    assert loop.time() - start < 1
    await ticks.aclose()


@pytest.mark.asyncio
async def test_ticker_periodic_repeats():
    """Test that periodic ticks keep coming."""
    count = 0
    async for _ in ticker(0.01):
        count += 1
        if count == 3:
            break

    assert count == 3


@pytest.mark.asyncio
async def test_ticker_drops_missed_ticks():
    """Test that a slow consumer does not get a burst of queued ticks."""
    loop = asyncio.get_running_loop()
    ticks = ticker(0.1)

    await ticks.__anext__()
    await asyncio.sleep(0.35)
    before = loop.time()
    for _ in range(3):
        await ticks.__anext__()
    elapsed = loop.time() - before
    await ticks.aclose()

    # Queued ticks would arrive back to back
    assert elapsed > 0.15


@pytest.mark.asyncio
async def test_async_timed_logs_duration(caplog):
    """Test that timed coroutines log their duration."""
    @async_timed
    async def work():
        return 42

    with caplog.at_level(logging.DEBUG, logger="metrics_forwarder.utils.timing"):
        result = await work()

    assert result == 42
    assert "work took" in caplog.text
