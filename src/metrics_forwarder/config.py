"""Configuration for the metrics forwarder."""
import logging
import os
from typing import Any, List, Optional
from urllib.parse import urlparse

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator, model_validator

from metrics_forwarder.adapters.delivery.librato import LIBRATO_METRICS_URL
from metrics_forwarder.core.errors import ConfigError
from metrics_forwarder.core.models.metrics import Credentials

logger = logging.getLogger(__name__)

EMAIL_ENV_VAR = "LIBRATO_EMAIL"
TOKEN_ENV_VAR = "LIBRATO_TOKEN"


class ForwarderSettings(BaseModel):
    """Settings for one forwarder process."""

    url: str = Field(..., description="URL of the service's metrics")
    source: str = Field("", description="Source label, defaults to the URL's host")
    gauges: List[str] = Field(default_factory=list, description="JSON paths to gauge values")
    counters: List[str] = Field(default_factory=list, description="JSON paths to counter values")
    email: str = Field("", description="Librato account email")
    token: SecretStr = Field(SecretStr(""), description="Librato account token")
    period: float = Field(0.0, ge=0, description="Seconds between collections, 0 for just once")
    timeout: Optional[float] = Field(None, gt=0, description="HTTP timeout in seconds")
    api_url: str = Field(LIBRATO_METRICS_URL, description="Metrics collection endpoint")

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str) -> str:
        """Reject empty or host-less URLs."""
        if not v:
            raise ValueError("No URL provided")
        parsed = urlparse(v)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Invalid URL: {v!r}")
        return v

    @model_validator(mode="after")
    def default_source(self) -> "ForwarderSettings":
        """Fall back to the URL's host when no source is given."""
        if not self.source:
            # Host and port only, without userinfo
            self.source = urlparse(self.url).netloc.rpartition("@")[2]
        return self

    @property
    def credentials(self) -> Credentials:
        """Credentials for the collection API."""
        return Credentials(email=self.email, token=self.token)


def load_settings(**overrides: Any) -> ForwarderSettings:
    """
    Build forwarder settings from explicit values and the environment.

    A ``.env`` file in the working directory is loaded first. Credentials not
    given explicitly are read from LIBRATO_EMAIL and LIBRATO_TOKEN.

    Args:
        **overrides: Settings values, None entries are ignored

    Returns:
        ForwarderSettings: Validated settings

    Raises:
        ConfigError: A required value is missing or invalid
    """
    load_dotenv(find_dotenv(usecwd=True))

    values = {key: value for key, value in overrides.items() if value is not None}
    if not values.get("email"):
        values["email"] = os.environ.get(EMAIL_ENV_VAR, "")
    if not values.get("token"):
        values["token"] = os.environ.get(TOKEN_ENV_VAR, "")

    try:
        settings = ForwarderSettings(**values)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc']) or 'settings'}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(messages) from e

    if not settings.email or not settings.token.get_secret_value():
        logger.warning("No Librato credentials configured; the API will reject the batch")

    return settings
