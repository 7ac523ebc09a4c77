"""Shared serialization utilities.

Converts decoded records into values the standard JSON serializer can emit
as strict JSON. The decoder can produce non-finite floats (``Infinity`` is a
valid numeric token), which ``json.dumps`` would otherwise write as the
non-standard ``Infinity``/``NaN`` literals.
"""

import math
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


def serialize_to_primitives(data: Any) -> Any:
    """Convert Python values to strict-JSON-serializable primitives.

    Handles:
    - Primitives (str, int, bool, None): returned as-is
    - Special floats (inf, nan): converted to None
    - Enum: converted to value
    - dataclass: converted to dict via asdict()
    - dict: recursively serialize values (keys coerced to str)
    - list/tuple: recursively serialize items

    Args:
        data: Any Python data structure.

    Returns:
        JSON-serializable data (primitives, dicts, lists only).

    Examples:
        >>> serialize_to_primitives({"price": float("inf"), "tags": ("a", "b")})
        {'price': None, 'tags': ['a', 'b']}
    """
    if data is None:
        return None

    # Enum first: str-mixin enums are also str instances
    if isinstance(data, Enum):
        return data.value

    if isinstance(data, (str, int, bool)):
        return data

    if isinstance(data, float):
        if math.isnan(data) or math.isinf(data):
            return None
        return data

    if is_dataclass(data) and not isinstance(data, type):
        return serialize_to_primitives(asdict(data))

    if isinstance(data, dict):
        return {str(k): serialize_to_primitives(v) for k, v in data.items()}

    if isinstance(data, (list, tuple)):
        return [serialize_to_primitives(item) for item in data]

    return str(data)
