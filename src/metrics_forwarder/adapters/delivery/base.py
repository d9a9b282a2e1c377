"""Base interfaces for batch senders."""
from abc import ABC, abstractmethod

from metrics_forwarder.core.models.metrics import Batch, Credentials


class BatchSender(ABC):
    """Base interface for all batch senders."""

    @abstractmethod
    async def send(self, batch: Batch, credentials: Credentials) -> None:
        """
        Deliver a batch to the metrics collection API.

        Args:
            batch: Batch to transmit
            credentials: Account used to authenticate the request

        Raises:
            NetworkError: The request could not be completed
            HTTPStatusError: The API did not answer 200
        """
        pass
