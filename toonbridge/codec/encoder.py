"""TOON Encoder.

Converts a JSON array of objects into the single-table TOON dialect:

    data[2]{id,name,role}:
      1,Alice,admin
      2,Bob,user

The header declares the collection name, the element count and the union of
field names (first-seen order) once; each record becomes one indented row of
comma-separated values. Commas, backslashes and line breaks inside values are
backslash-escaped so the row separator is always unambiguous.

Usage:
    from toonbridge.codec.encoder import ToonEncoder

    encoder = ToonEncoder()
    toon_output = encoder.encode([{"id": 1, "name": "Alice"}])

Design Decisions:
- Validation happens before any output is built; failures never leave
  partial text behind
- Numbers render like JavaScript's ``Number.prototype.toString`` so that
  documents are byte-identical to those produced by browser tooling
- Nested objects/arrays are embedded as compact JSON with escaped commas;
  numbers inside them use the same layout as top-level values
"""

from collections.abc import Iterable
from typing import Any

from toonbridge.codec.header import format_header
from toonbridge.codec.json_text import dumps, format_number
from toonbridge.constants import (
    COLLECTION_NAME,
    FALSE_LITERAL,
    FIELD_SEPARATOR,
    NULL_LITERAL,
    ROW_INDENT,
    STRING_ESCAPES,
    TRUE_LITERAL,
    trim,
)
from toonbridge.types.core import Record
from toonbridge.types.errors import ElementNotObjectError, NotAnArrayError
from toonbridge.utils.logger import logger


def escape_string(value: str) -> str:
    """Escape backslash, comma, LF and CR (in that order)."""
    for raw, escaped in STRING_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def format_compound(value: dict | list) -> str:
    """Compact JSON with every comma escaped."""
    text = dumps(value)
    return text.replace(FIELD_SEPARATOR, "\\" + FIELD_SEPARATOR)


def format_value(value: Any) -> str:
    """Serialize one field value for a data row."""
    if value is None:
        return NULL_LITERAL
    if isinstance(value, str):
        return escape_string(value)
    # bool before numbers: bool is an int subclass
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (dict, list)):
        return format_compound(value)
    return escape_string(str(value))


def collect_fields(records: Iterable[Record]) -> list[str]:
    """Union of field names across records, in first-seen order."""
    fields: dict[str, None] = {}
    for record in records:
        fields.update(dict.fromkeys(record))
    return list(fields)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class ToonEncoder:
    """Encoder for converting record collections to TOON text.

    Attributes:
        collection_name: Name written at the start of the header.
        indent: Prefix written before every data row.
    """

    def __init__(self, collection_name: str = COLLECTION_NAME, indent: str = ROW_INDENT):
        self.collection_name = collection_name
        self.indent = indent

    def encode(self, data: Any) -> str:
        """Encode a JSON array of objects to TOON.

        Args:
            data: The decoded JSON value (must be a list of dicts).

        Returns:
            TOON-formatted string; empty for an empty list or when no record
            has any field.

        Raises:
            NotAnArrayError: If data is not a list.
            ElementNotObjectError: If any element is not a dict.
        """
        if not isinstance(data, list):
            raise NotAnArrayError(_json_type_name(data))

        if not data:
            return ""

        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ElementNotObjectError(index, _json_type_name(item))

        fields = collect_fields(data)
        if not fields:
            logger.debug(f"Encoding {len(data)} empty records to empty TOON")
            return ""

        lines = [format_header(len(data), fields, self.collection_name)]
        for record in data:
            row = FIELD_SEPARATOR.join(format_value(record.get(field)) for field in fields)
            lines.append(f"{self.indent}{row}")

        logger.debug(f"Encoded {len(data)} records with {len(fields)} fields to TOON")
        return trim("\n".join(lines) + "\n")


_default_encoder = ToonEncoder()


def to_toon(data: Any) -> str:
    """Encode with the default encoder."""
    return _default_encoder.encode(data)
