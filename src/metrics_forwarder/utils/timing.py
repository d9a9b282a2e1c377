"""
Timing utilities for the metrics forwarder.
This module provides the collection ticker, duration parsing and timing helpers.
"""
import asyncio
import logging
import re
import time
from typing import Any, AsyncIterator, Callable, Coroutine, TypeVar
from functools import wraps

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Seconds per Go-style duration unit
DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(value: str) -> float:
    """
    Parse a duration string such as "30s", "1m30s" or "1.5h" into seconds.

    Args:
        value: Duration string; a bare "0" is accepted

    Returns:
        float: Duration in seconds

    Raises:
        ValueError: The string is not a valid duration
    """
    text = value.strip()
    if text in ("0", "+0", "-0"):
        return 0.0

    sign = 1.0
    if text[:1] in ("+", "-"):
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]

    if not text:
        raise ValueError(f"invalid duration {value!r}")

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {value!r}")
        total += float(match.group(1)) * DURATION_UNITS[match.group(2)]
        pos = match.end()

    return sign * total


async def ticker(period: float) -> AsyncIterator[float]:
    """
    Yield collection ticks.

    With a non-positive period a single tick is produced. Otherwise the first
    tick fires immediately and then one every ``period`` seconds on a fixed
    schedule; ticks missed while the consumer was busy are dropped.

    Args:
        period: Interval between ticks in seconds

    Yields:
        float: Wall-clock time of the tick
    """
    if period <= 0:
        yield time.time()
        return

    loop = asyncio.get_running_loop()
    next_tick = loop.time()
    while True:
        yield time.time()
        next_tick += period
        now = loop.time()
        if now > next_tick:
            # Skip over missed ticks
            missed = int((now - next_tick) // period) + 1
            next_tick += missed * period
        await asyncio.sleep(next_tick - now)


def async_timed(func: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., Coroutine[Any, Any, T]]:
    """
    Decorator to measure and log the execution time of async functions.

    Args:
        func: Async function to time

    Returns:
        Callable: Wrapped function that logs execution time
    """
    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        start_time = time.time()
        try:
            result = await func(*args, **kwargs)
            return result
        finally:
            end_time = time.time()
            duration = end_time - start_time
            logger.debug(f"{func.__name__} took {duration:.4f} seconds")

    return wrapper
