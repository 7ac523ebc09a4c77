"""Shared constants for toonbridge.

Centralizes the TOON grammar pieces that the encoder and decoder both rely
on: the collection name, row indentation, the escape alphabet and the
header pattern.
"""

import re
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)


# Every encoded document uses this collection name in its header
COLLECTION_NAME = "data"

# Data rows are indented by two spaces; the decoder ignores indentation
ROW_INDENT = "  "

FIELD_SEPARATOR = ","
ESCAPE_CHAR = "\\"
NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

# Encoder escapes, applied in this order (backslash must come first)
STRING_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    (",", "\\,"),
    ("\n", "\\n"),
    ("\r", "\\r"),
)

# Decoder: character following a backslash -> emitted character.
# Characters not listed here are emitted verbatim.
ESCAPE_SEQUENCES: dict[str, str] = {
    "\\": "\\",
    ",": ",",
    "n": "\n",
    "r": "\r",
}

# arrayName[count]{key1,key2,key3}:
HEADER_PATTERN = re.compile(r"(\w+)\[(\d+)\]\{([^}]+)\}:", re.ASCII)
HEADER_GRAMMAR = "arrayName[count]{key1,key2,key3}:"

# Default upper bound on conversion input size (characters)
DEFAULT_MAX_INPUT_LENGTH = 1_000_000

# ECMAScript WhiteSpace and LineTerminator code points (String.prototype.trim)
TRIM_CHARACTERS = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace the way JavaScript's ``trim`` does.

    Unlike ``str.strip()``, control characters such as ``\\x1c``-``\\x1f`` and
    ``\\x85`` are kept, and the byte order mark ``\\ufeff`` is removed.
    """
    return text.strip(TRIM_CHARACTERS)
