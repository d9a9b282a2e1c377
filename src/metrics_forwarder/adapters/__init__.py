"""Initialization file for the adapters module."""
from metrics_forwarder.adapters import delivery, ingestion

__all__ = ["delivery", "ingestion"]
