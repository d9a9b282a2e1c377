"""Assembly of a metrics batch from a fetched document."""
import logging
from typing import Any, Dict, Iterable, Mapping

from metrics_forwarder.core.models.metrics import Batch, Counter, Gauge, MetricKind
from metrics_forwarder.core.paths import resolve

logger = logging.getLogger(__name__)


def build_batch(
    document: Mapping[str, Any],
    source: str,
    gauge_paths: Iterable[str],
    counter_paths: Iterable[str]
) -> Batch:
    """
    Resolve every requested path and assemble a batch.

    The first path that fails to resolve aborts the build; no partial batch
    is ever returned. Repeated paths overwrite earlier entries.

    Args:
        document: Parsed JSON object fetched from the metrics endpoint
        source: Label identifying the originating host or service
        gauge_paths: Dotted paths to extract as gauges
        counter_paths: Dotted paths to extract as counters

    Returns:
        Batch: Immutable batch tagged with the source label
    """
    gauges: Dict[str, Gauge] = {}
    for path in gauge_paths:
        value = resolve(document, path, MetricKind.GAUGE)
        logger.info(f"  {path}={value}")
        gauges[path] = Gauge(value=value)

    counters: Dict[str, Counter] = {}
    for path in counter_paths:
        value = resolve(document, path, MetricKind.COUNTER)
        logger.info(f"  {path}={value}")
        counters[path] = Counter(value=value)

    return Batch(gauges=gauges, counters=counters, source=source)
