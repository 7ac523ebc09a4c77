"""Scalar type inference for decoded TOON tokens.

Each token runs through an ordered chain of classifiers; the first whose
predicate matches converts the token. The order is significant:

1. ``null``                        -> None
2. ``true`` / ``false``            -> bool
3. numeric literal (non-empty)     -> int / float
4. starts with ``{`` or ``[``      -> parsed JSON, or the raw text if it does not parse
5. anything else                   -> the raw text

Numeric literals follow the JavaScript ``Number()`` string grammar, since
that is what produced the documents this format was designed around:
optional sign, decimal digits with optional fraction and exponent (``5.``,
``.5``, ``1e3``), ``Infinity``, and unsigned ``0x``/``0o``/``0b`` integers.
Text with surrounding garbage (``12abc``), digit separators (``1_000``) and
``NaN`` are not numbers.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable

from toonbridge.codec.json_text import loads
from toonbridge.constants import FALSE_LITERAL, NULL_LITERAL, TRUE_LITERAL

_DECIMAL_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_NUMBER = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)
_NON_DECIMAL_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)

# Largest integer a double represents exactly
_MAX_SAFE_INTEGER = 2**53


@dataclass(frozen=True)
class Classifier:
    """One link of the inference chain."""

    name: str
    matches: Callable[[str], bool]
    convert: Callable[[str], Any]


def is_numeric(token: str) -> bool:
    """True for non-empty text that is entirely a numeric literal."""
    if not token:
        return False
    return bool(
        _DECIMAL_NUMBER.fullmatch(token) or _NON_DECIMAL_INTEGER.fullmatch(token)
    )


def parse_number(token: str) -> int | float:
    """Convert a numeric literal accepted by ``is_numeric``.

    Decimal integer literals keep full precision. Other literals go through
    float and collapse to int when they are integral and exactly representable.
    """
    if _NON_DECIMAL_INTEGER.fullmatch(token):
        return int(token, 0)
    if _DECIMAL_INTEGER.fullmatch(token):
        return int(token)

    value = float(token)
    if math.isfinite(value) and value.is_integer() and abs(value) <= _MAX_SAFE_INTEGER:
        return int(value)
    return value


def looks_compound(token: str) -> bool:
    return token.startswith(("{", "["))


def parse_compound(token: str) -> Any:
    """Parse embedded JSON; unparsable text is returned unchanged."""
    try:
        return loads(token)
    except (ValueError, RecursionError):
        return token


INFERENCE_CHAIN: tuple[Classifier, ...] = (
    Classifier("null", lambda t: t == NULL_LITERAL, lambda t: None),
    Classifier("boolean", lambda t: t in (TRUE_LITERAL, FALSE_LITERAL), lambda t: t == TRUE_LITERAL),
    Classifier("number", is_numeric, parse_number),
    Classifier("compound", looks_compound, parse_compound),
    Classifier("string", lambda t: True, lambda t: t),
)


def infer_value(token: str) -> Any:
    """Convert a decoded token to its JSON value.

    Examples:
        >>> infer_value("29.99")
        29.99
        >>> infer_value("")
        ''
        >>> infer_value('{"x":1,"y":2}')
        {'x': 1, 'y': 2}
        >>> infer_value("{broken")
        '{broken'
    """
    for classifier in INFERENCE_CHAIN:
        if classifier.matches(token):
            return classifier.convert(token)
    return token
