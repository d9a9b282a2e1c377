"""Core metrics data models."""
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr, StrictInt


class MetricKind(str, Enum):
    """Numeric kind a metric path is resolved as."""

    GAUGE = "gauge"
    COUNTER = "counter"


class Gauge(BaseModel):
    """Point-in-time floating-point metric value."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Value of the gauge")


class Counter(BaseModel):
    """Point-in-time integer metric value."""

    model_config = ConfigDict(frozen=True)

    value: StrictInt = Field(..., description="Value of the counter")


class Batch(BaseModel):
    """Gauges and counters sent to the collection API in one request."""

    model_config = ConfigDict(frozen=True)

    gauges: Dict[str, Gauge] = Field(default_factory=dict, description="Gauges keyed by metric path")
    counters: Dict[str, Counter] = Field(default_factory=dict, description="Counters keyed by metric path")
    source: str = Field(..., description="Host or service the metrics originate from")

    @property
    def metric_count(self) -> int:
        """Number of metrics carried by the batch."""
        return len(self.gauges) + len(self.counters)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready body expected by the collection API."""
        return self.model_dump(include={"gauges", "counters", "source"})


class Credentials(BaseModel):
    """Basic-auth identity for the collection API."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., description="Account email")
    token: SecretStr = Field(..., description="Account API token")
