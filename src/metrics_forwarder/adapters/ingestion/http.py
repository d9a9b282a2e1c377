"""HTTP implementation of the metrics fetcher."""
import logging
from typing import Any, Dict, Optional

import requests
from requests.exceptions import RequestException

from metrics_forwarder.adapters.ingestion.base import MetricsFetcher
from metrics_forwarder.core.errors import DecodeError, HTTPStatusError, NetworkError

logger = logging.getLogger(__name__)

class HTTPMetricsFetcher(MetricsFetcher):
    """Fetcher that GETs a JSON metrics document over HTTP."""

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the HTTP fetcher.

        Args:
            timeout: Request timeout in seconds, None for the transport default
        """
        self.timeout = timeout

    async def fetch(self, url: str) -> Dict[str, Any]:
        """
        Fetch and parse the metrics document at the given URL.

        Args:
            url: URL of the service's metrics

        Returns:
            Dict[str, Any]: Parsed JSON object
        """
        try:
            response = requests.get(url, timeout=self.timeout)
        except RequestException as e:
            raise NetworkError(f"Error fetching metrics from {url}: {e}") from e

        try:
            if response.status_code != 200:
                raise HTTPStatusError(response.status_code, response.reason or "", url=url)

            try:
                document = response.json()
            except ValueError as e:
                raise DecodeError(f"Invalid JSON from {url}: {e}") from e
        finally:
            response.close()

        if not isinstance(document, dict):
            raise DecodeError(f"Expected a JSON object from {url}, got {type(document).__name__}")

        logger.debug(f"Fetched {len(document)} top-level keys from {url}")
        return document

    async def health_check(self, url: str) -> Dict[str, Any]:
        """
        Check the health of the metrics endpoint.

        Args:
            url: URL of the service's metrics

        Returns:
            Dict[str, Any]: Health check results
        """
        try:
            response = requests.get(url, timeout=self.timeout)
        except RequestException as e:
            logger.error(f"Health check failed: {e}")
            return {
                "status": "unhealthy",
                "details": {
                    "url": url,
                    "error": str(e)
                }
            }

        try:
            if response.status_code == 200:
                return {
                    "status": "healthy",
                    "details": {
                        "url": url,
                        "status_code": response.status_code
                    }
                }
            return {
                "status": "degraded",
                "details": {
                    "url": url,
                    "status_code": response.status_code,
                    "message": f"Endpoint returned status code {response.status_code}"
                }
            }
        finally:
            response.close()
