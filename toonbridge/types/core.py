"""
Core types for TOON conversion.

These are the transient values that flow through one encode or decode call:
records, the parsed header, and the decode result that carries advisory
diagnostics alongside the parsed records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# A record is an ordered mapping of field name to JSON value
Record = dict[str, Any]


class ConversionMode(str, Enum):
    """Direction of a conversion request."""

    JSON_TO_TOON = "json-to-toon"
    TOON_TO_JSON = "toon-to-json"


@dataclass(frozen=True)
class ToonHeader:
    """Parsed ``name[count]{fields}:`` header line."""

    name: str
    count: int
    fields: list[str]

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must be non-negative")


@dataclass(frozen=True)
class DecodeWarning:
    """Non-fatal diagnostic produced while decoding."""

    code: str
    message: str
    declared: int | None = None
    actual: int | None = None


@dataclass
class DecodeResult:
    """Records parsed from a TOON document plus any advisory warnings."""

    records: list[Record] = field(default_factory=list)
    warnings: list[DecodeWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
