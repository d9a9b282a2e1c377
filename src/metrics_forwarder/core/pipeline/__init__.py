"""Initialization file for the collection pipeline."""
from metrics_forwarder.core.pipeline.batcher import build_batch
from metrics_forwarder.core.pipeline.collector import MetricsCollector

__all__ = ["build_batch", "MetricsCollector"]
