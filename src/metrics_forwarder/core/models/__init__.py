"""Initialization file for the core models."""
from metrics_forwarder.core.models.metrics import (
    Batch,
    Counter,
    Credentials,
    Gauge,
    MetricKind
)

__all__ = [
    "Batch",
    "Counter",
    "Credentials",
    "Gauge",
    "MetricKind"
]
