"""Librato implementation of the batch sender."""
import base64
import json
import logging
from typing import Optional

import requests
from requests.exceptions import RequestException

from metrics_forwarder.adapters.delivery.base import BatchSender
from metrics_forwarder.core.errors import HTTPStatusError, NetworkError
from metrics_forwarder.core.models.metrics import Batch, Credentials

logger = logging.getLogger(__name__)

LIBRATO_METRICS_URL = "https://metrics-api.librato.com/v1/metrics"


def basic_auth(identity: str, secret: str) -> str:
    """Build a Basic Authorization header value using URL-safe base64."""
    creds = base64.urlsafe_b64encode(f"{identity}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {creds}"


class LibratoBatchSender(BatchSender):
    """Sender that POSTs batches to the Librato metrics API."""

    def __init__(
        self,
        api_url: str = LIBRATO_METRICS_URL,
        timeout: Optional[float] = None,
        verify_ssl: bool = True
    ):
        """
        Initialize the Librato sender.

        Args:
            api_url: URL of the metrics collection endpoint
            timeout: Request timeout in seconds, None for the transport default
            verify_ssl: Whether to verify SSL certificates
        """
        self.api_url = api_url
        self.timeout = timeout
        self.verify_ssl = verify_ssl

    async def send(self, batch: Batch, credentials: Credentials) -> None:
        """
        Send a batch in a single POST request.

        Args:
            batch: Batch to transmit
            credentials: Account used to authenticate the request
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": basic_auth(credentials.email, credentials.token.get_secret_value())
        }

        try:
            response = requests.post(
                self.api_url,
                headers=headers,
                data=json.dumps(batch.to_payload()),
                timeout=self.timeout,
                verify=self.verify_ssl
            )
        except RequestException as e:
            raise NetworkError(f"Error sending metrics to {self.api_url}: {e}") from e

        try:
            if response.status_code != 200:
                raise HTTPStatusError(response.status_code, response.reason or "", response.text, self.api_url)
        finally:
            response.close()

        logger.debug(f"Batch of {batch.metric_count} metrics accepted by {self.api_url}")
