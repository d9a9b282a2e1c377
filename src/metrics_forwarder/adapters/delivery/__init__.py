"""Initialization file for the batch senders."""
from metrics_forwarder.adapters.delivery.base import BatchSender
from metrics_forwarder.adapters.delivery.librato import LIBRATO_METRICS_URL, LibratoBatchSender, basic_auth

__all__ = ["BatchSender", "LibratoBatchSender", "LIBRATO_METRICS_URL", "basic_auth"]
