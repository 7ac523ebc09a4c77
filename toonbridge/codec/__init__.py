"""
TOON codec.

Bidirectional conversion between a JSON array of objects and the
single-table TOON notation (``data[N]{fields}:`` followed by indented rows).
"""

from .decoder import ToonDecoder, decode_toon, from_toon
from .encoder import (
    ToonEncoder,
    collect_fields,
    escape_string,
    format_number,
    format_value,
    to_toon,
)
from .header import format_header, parse_header
from .json_text import dumps, loads
from .inference import INFERENCE_CHAIN, infer_value, is_numeric
from .tokenizer import ScanState, tokenize_row

__all__ = [
    # Encoder
    "ToonEncoder",
    "collect_fields",
    "escape_string",
    "format_number",
    "format_value",
    "to_toon",
    # Decoder
    "ToonDecoder",
    "decode_toon",
    "from_toon",
    # JSON text
    "dumps",
    "loads",
    # Grammar
    "format_header",
    "parse_header",
    "ScanState",
    "tokenize_row",
    "INFERENCE_CHAIN",
    "infer_value",
    "is_numeric",
]
