"""JSON text handling shared by the codec and the conversion boundary.

Parsing is strict: the non-standard ``NaN``/``Infinity``/``-Infinity``
constants that ``json.loads`` accepts by default are rejected.

Rendering follows ``JSON.stringify``: numbers use the same layout as TOON
values (``1`` rather than ``1.0``, ``0.00001`` rather than ``1e-05``), so a
value prints identically whether it sits in a row or inside embedded JSON.

Usage:
    from toonbridge.codec.json_text import dumps, loads

    dumps({"x": 1.0, "y": [0.00001]})           # '{"x":1,"y":[0.00001]}'
    dumps([{"a": 1}], indent=2)                  # pretty-printed
    loads("[NaN]")                               # raises ValueError
"""

import json
import math
from decimal import Decimal
from typing import Any

from toonbridge.constants import FALSE_LITERAL, NULL_LITERAL, TRUE_LITERAL


def format_number(value: int | float) -> str:
    """Render a number the way JavaScript's ``String(number)`` does.

    Uses the shortest round-trip digits (Python's ``repr``) laid out with the
    ECMAScript rules: positional notation for exponents in [-7, 21),
    exponent notation (``1e+21``, ``1.5e-7``) outside that range, and no
    trailing ``.0`` on integral values. Non-finite floats render as ``null``
    because JSON cannot carry them.

    Examples:
        >>> format_number(29.99)
        '29.99'
        >>> format_number(1.0)
        '1'
        >>> format_number(1e21)
        '1e+21'
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return NULL_LITERAL
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    while len(digits) > 1 and digits.endswith("0"):
        digits = digits[:-1]
        exponent += 1

    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return f"{prefix}{digits}{'0' * (n - k)}"
    if 0 < n <= 21:
        return f"{prefix}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{prefix}0.{'0' * -n}{digits}"

    exp = n - 1
    mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
    exp_sign = "+" if exp >= 0 else "-"
    return f"{prefix}{mantissa}e{exp_sign}{abs(exp)}"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def loads(text: str | bytes | bytearray) -> Any:
    """Parse strict JSON text.

    Raises:
        ValueError: For malformed JSON or NaN/Infinity constants.
    """
    return json.loads(text, parse_constant=_reject_constant)


def _format_key(key: Any) -> str:
    if isinstance(key, str):
        text = key
    elif key is None:
        text = NULL_LITERAL
    elif isinstance(key, bool):
        text = TRUE_LITERAL if key else FALSE_LITERAL
    elif isinstance(key, (int, float)):
        text = format_number(key)
    else:
        raise TypeError(f"Keys must be str, int, float, bool or None, not {type(key).__name__}")
    return json.dumps(text, ensure_ascii=False)


def _render(value: Any, indent: int | None, depth: int) -> str:
    if value is None:
        return NULL_LITERAL
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    # bool before numbers: bool is an int subclass
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, (int, float)):
        return format_number(value)

    if isinstance(value, dict):
        separator = ":" if indent is None else ": "
        items = [
            f"{_format_key(k)}{separator}{_render(v, indent, depth + 1)}"
            for k, v in value.items()
        ]
        return _wrap("{", "}", items, indent, depth)
    if isinstance(value, (list, tuple)):
        items = [_render(item, indent, depth + 1) for item in value]
        return _wrap("[", "]", items, indent, depth)

    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _wrap(opening: str, closing: str, items: list[str], indent: int | None, depth: int) -> str:
    if not items:
        return opening + closing
    if indent is None:
        return opening + ",".join(items) + closing

    inner = "\n" + " " * (indent * (depth + 1))
    outer = "\n" + " " * (indent * depth)
    return opening + inner + ("," + inner).join(items) + outer + closing


def dumps(value: Any, indent: int | None = None) -> str:
    """Serialize a JSON value with ``JSON.stringify`` layout.

    Compact (no spaces) by default; with ``indent``, one member per line and
    ``": "`` between keys and values. Non-ASCII text is written as-is.

    Raises:
        TypeError: For values JSON cannot represent.
    """
    return _render(value, indent, 0)
