"""Initialization file for the metrics fetchers."""
from metrics_forwarder.adapters.ingestion.base import MetricsFetcher
from metrics_forwarder.adapters.ingestion.http import HTTPMetricsFetcher

__all__ = ["MetricsFetcher", "HTTPMetricsFetcher"]
