"""Usage information for the JSON ⇄ TOON converter.

The worked examples are generated with the real codec so the documentation
can never drift from the implementation.
"""

from typing import Any

from toonbridge.codec.encoder import to_toon
from toonbridge.codec.json_text import dumps
from toonbridge.constants import HEADER_GRAMMAR
from toonbridge.types.core import ConversionMode

_USERS = [
    {"id": 1, "name": "Alice", "role": "admin"},
    {"id": 2, "name": "Bob", "role": "user"},
]
_PRODUCTS = [
    {"id": 1, "name": "Product A", "price": 29.99, "inStock": True},
    {"id": 2, "name": "Product B", "price": 49.99, "inStock": False},
]

FORMAT_RULES = [
    "Header declares: array name, count, and column names",
    "Data rows are indented with 2 spaces",
    "Values separated by commas",
    "Escape commas in values with backslash (\\,)",
    "Backslashes, newlines and carriage returns are escaped as \\\\, \\n and \\r",
    "Supports strings, numbers, booleans, null, and nested JSON",
    "The header count is advisory: a mismatch produces a warning, not an error",
]


def _example(input_text: str, mode: ConversionMode, output: str) -> dict[str, Any]:
    return {
        "request": {"input": input_text, "mode": mode.value},
        "response": {
            "success": True,
            "mode": mode.value,
            "input": input_text,
            "output": output,
        },
    }


def get_usage_info() -> dict[str, Any]:
    """Describe the conversion request shape, the TOON format and examples."""
    users_json = dumps(_USERS)
    users_toon = to_toon(_USERS)
    products_json = dumps(_PRODUCTS)

    return {
        "message": "JSON to TOON Converter",
        "description": (
            "TOON (Token-Oriented Object Notation) is a compact tabular format that "
            "declares field names once and lists one row per record, reducing the "
            "tokens needed to pass uniform JSON arrays to language models."
        ),
        "usage": {
            "body": {
                "input": "string (required) - The JSON array or TOON string to convert",
                "mode": 'string (required) - Either "json-to-toon" or "toon-to-json"',
            },
            "toonFormat": {
                "syntax": f"{HEADER_GRAMMAR}\n  value1,value2,value3\n  value4,value5,value6",
                "rules": FORMAT_RULES,
            },
            "examples": {
                "jsonToToon": _example(users_json, ConversionMode.JSON_TO_TOON, users_toon),
                "toonToJson": _example(
                    users_toon,
                    ConversionMode.TOON_TO_JSON,
                    dumps(_USERS, indent=2),
                ),
                "complexData": _example(
                    products_json, ConversionMode.JSON_TO_TOON, to_toon(_PRODUCTS)
                ),
            },
        },
    }
