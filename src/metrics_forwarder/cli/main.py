"""
Command-line entry point for the metrics forwarder.

Example:
    metrics_forwarder --url http://localhost:8080/debug/vars \\
        --gauge memstats.HeapAlloc --counter memstats.NumGC \\
        --email me@example.com --token abc123 --period 1m
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from metrics_forwarder.adapters.delivery import LibratoBatchSender
from metrics_forwarder.adapters.ingestion import HTTPMetricsFetcher
from metrics_forwarder.config import load_settings
from metrics_forwarder.core.errors import ConfigError
from metrics_forwarder.core.pipeline import MetricsCollector
from metrics_forwarder.utils.timing import parse_duration

logger = logging.getLogger(__name__)


def duration(value: str) -> float:
    """argparse type for Go-style durations."""
    try:
        return parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="metrics_forwarder",
        description="Send values from a JSON metrics endpoint to Librato"
    )
    parser.add_argument("--url", default="", help="URL of the service's metrics")
    parser.add_argument("--source", default="", help="an optional source to use instead of the URL's host")
    parser.add_argument("--gauge", action="append", default=[], dest="gauges",
                        help="the JSON path to a gauge's value (repeatable)")
    parser.add_argument("--counter", action="append", default=[], dest="counters",
                        help="the JSON path to a counter's value (repeatable)")
    parser.add_argument("--email", default=None, help="Librato account email (or LIBRATO_EMAIL)")
    parser.add_argument("--token", default=None, help="Librato account token (or LIBRATO_TOKEN)")
    parser.add_argument("--period", type=duration, default=0.0,
                        help="send data periodically, e.g. 30s or 5m (0 for just once)")
    parser.add_argument("--timeout", type=duration, default=None, help="HTTP request timeout, e.g. 10s")
    parser.add_argument("--check", action="store_true",
                        help="only check that the metrics URL is reachable, then exit")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the forwarder."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if not args.url:
        print("No URL provided", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        settings = load_settings(
            url=args.url,
            source=args.source,
            gauges=args.gauges,
            counters=args.counters,
            email=args.email,
            token=args.token,
            period=args.period,
            timeout=args.timeout
        )
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    fetcher = HTTPMetricsFetcher(timeout=settings.timeout)

    if args.check:
        health = asyncio.run(fetcher.health_check(settings.url))
        logger.info(f"{settings.url} is {health['status']}: {health['details']}")
        return 0 if health["status"] == "healthy" else 1

    collector = MetricsCollector(
        fetcher=fetcher,
        sender=LibratoBatchSender(api_url=settings.api_url, timeout=settings.timeout)
    )

    try:
        succeeded = asyncio.run(collector.run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping")
        return 0

    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
