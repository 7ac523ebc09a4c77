"""TOON header line: ``arrayName[count]{key1,key2,key3}:``."""

from collections.abc import Sequence

from toonbridge.constants import COLLECTION_NAME, FIELD_SEPARATOR, HEADER_PATTERN, trim
from toonbridge.types.core import ToonHeader
from toonbridge.types.errors import MalformedHeaderError


def format_header(count: int, fields: Sequence[str], name: str = COLLECTION_NAME) -> str:
    """Render a header line. Field names are written verbatim."""
    return f"{name}[{count}]{{{FIELD_SEPARATOR.join(fields)}}}:"


def parse_header(line: str) -> ToonHeader:
    """Parse a header line.

    The whole line must match the grammar; a single trailing carriage return
    (CRLF documents) is tolerated. Field names are stripped of surrounding
    whitespace but never deduplicated.

    Raises:
        MalformedHeaderError: If the line deviates from the grammar.
    """
    if line.endswith("\r"):
        line = line[:-1]

    match = HEADER_PATTERN.fullmatch(line)
    if match is None:
        raise MalformedHeaderError(line)

    name, count, body = match.groups()
    fields = [trim(field) for field in body.split(FIELD_SEPARATOR)]
    return ToonHeader(name=name, count=int(count), fields=fields)
