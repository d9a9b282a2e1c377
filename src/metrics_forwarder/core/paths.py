"""Resolution of dotted metric paths against a fetched JSON document."""
import math
from typing import Any, List, Mapping, Union

from metrics_forwarder.core.errors import PathNotFound, TypeMismatch
from metrics_forwarder.core.models.metrics import MetricKind

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def split_path(path: str) -> List[str]:
    """Split a metric path into its segments. Literal dots cannot be escaped."""
    return path.split(".")


def resolve(document: Mapping[str, Any], path: str, kind: MetricKind) -> Union[float, int]:
    """
    Resolve a dotted path in a JSON document and coerce the leaf value.

    Args:
        document: Parsed JSON object
        path: Dot-separated sequence of object keys, e.g. "memory.used"
        kind: MetricKind.GAUGE for a float, MetricKind.COUNTER for an int

    Returns:
        Union[float, int]: The leaf value coerced to the requested kind

    Raises:
        PathNotFound: A segment is missing or an intermediate value is not an object
        TypeMismatch: The leaf is not a number, or is fractional for a counter
    """
    node: Any = document
    for segment in split_path(path):
        if not isinstance(node, Mapping) or segment not in node:
            raise PathNotFound(path, segment)
        node = node[segment]

    # bool is an int subclass but never a JSON number
    if isinstance(node, bool) or not isinstance(node, (int, float)):
        raise TypeMismatch(path, node, kind.value)
    if isinstance(node, float) and not math.isfinite(node):
        raise TypeMismatch(path, node, kind.value)

    if kind is MetricKind.GAUGE:
        try:
            return float(node)
        except OverflowError as e:
            raise TypeMismatch(path, node, kind.value) from e

    if isinstance(node, float) and not node.is_integer():
        raise TypeMismatch(path, node, kind.value)
    value = int(node)
    if not INT64_MIN <= value <= INT64_MAX:
        raise TypeMismatch(path, node, kind.value)
    return value
