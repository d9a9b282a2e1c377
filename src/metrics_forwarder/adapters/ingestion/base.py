"""Base interfaces for metrics fetchers."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class MetricsFetcher(ABC):
    """Base interface for all metrics fetchers."""

    @abstractmethod
    async def fetch(self, url: str) -> Dict[str, Any]:
        """
        Fetch the JSON metrics document exposed by a service.

        Args:
            url: URL of the service's metrics

        Returns:
            Dict[str, Any]: Parsed JSON object

        Raises:
            NetworkError: The request could not be completed
            HTTPStatusError: The service did not answer 200
            DecodeError: The body is not a JSON object
        """
        pass

    @abstractmethod
    async def health_check(self, url: str) -> Dict[str, Any]:
        """
        Check whether the metrics endpoint is reachable.

        Args:
            url: URL of the service's metrics

        Returns:
            Dict[str, Any]: Health check results
                {
                    "status": str,  # "healthy", "degraded", or "unhealthy"
                    "details": Dict[str, Any]  # Additional details about the health check
                }
        """
        pass
