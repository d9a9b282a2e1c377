"""Initialization file for the utilities."""
from metrics_forwarder.utils.timing import async_timed, parse_duration, ticker

__all__ = ["async_timed", "parse_duration", "ticker"]
