"""Collection cycle orchestration: fetch, build, send."""
import logging
from typing import Iterable

from metrics_forwarder.adapters.delivery import BatchSender
from metrics_forwarder.adapters.ingestion import MetricsFetcher
from metrics_forwarder.config import ForwarderSettings
from metrics_forwarder.core.errors import ForwarderError
from metrics_forwarder.core.models.metrics import Credentials
from metrics_forwarder.core.pipeline.batcher import build_batch
from metrics_forwarder.utils.timing import async_timed, ticker

logger = logging.getLogger(__name__)

class MetricsCollector:
    """
    Runs collection cycles against one metrics endpoint.

    Each cycle fetches the JSON document, extracts the requested gauges and
    counters and sends them as a single batch. A cycle either sends every
    requested metric or fails; nothing is carried over between cycles.
    """

    def __init__(self, fetcher: MetricsFetcher, sender: BatchSender):
        """
        Initialize the collector.

        Args:
            fetcher: Adapter used to fetch the metrics document
            sender: Adapter used to deliver the batch
        """
        self.fetcher = fetcher
        self.sender = sender

    @async_timed
    async def run_once(
        self,
        url: str,
        source: str,
        gauge_paths: Iterable[str],
        counter_paths: Iterable[str],
        credentials: Credentials
    ) -> int:
        """
        Run a single collection cycle.

        Args:
            url: URL of the service's metrics
            source: Source label attached to the batch
            gauge_paths: Dotted paths to extract as gauges
            counter_paths: Dotted paths to extract as counters
            credentials: Account used to authenticate with the collection API

        Returns:
            int: Number of metrics sent

        Raises:
            ForwarderError: Any failure while fetching, building or sending
        """
        document = await self.fetcher.fetch(url)
        batch = build_batch(document, source, gauge_paths, counter_paths)
        await self.sender.send(batch, credentials)
        return batch.metric_count

    async def run(self, settings: ForwarderSettings) -> bool:
        """
        Run collection cycles on the configured schedule.

        With a zero period a single cycle runs. Otherwise cycles run until the
        task is cancelled; a failed cycle is logged and the next one proceeds.

        Args:
            settings: Forwarder settings

        Returns:
            bool: Whether the last cycle succeeded
        """
        succeeded = False
        credentials = settings.credentials

        async for _ in ticker(settings.period):
            logger.info(f"collecting {settings.url}")
            try:
                count = await self.run_once(
                    settings.url,
                    settings.source,
                    settings.gauges,
                    settings.counters,
                    credentials
                )
            except ForwarderError as e:
                logger.error(f"collection failed: {type(e).__name__}: {e}")
                succeeded = False
                continue
            except Exception as e:
                logger.exception(f"Unexpected error during collection: {e}")
                succeeded = False
                continue

            logger.info(f"sent {count} metrics")
            succeeded = True

        return succeeded
