"""TOON Decoder.

Parses the single-table TOON dialect back into a list of records. The
header is the only strictly validated part of a document; data rows
degrade gracefully: missing values become empty strings, surplus values
are dropped, and unparsable embedded JSON stays a string.

The element count in the header is advisory. When it disagrees with the
number of rows actually present, decoding still succeeds and the result
carries a ``count_mismatch`` warning.
"""

from toonbridge.codec.header import parse_header
from toonbridge.codec.inference import infer_value
from toonbridge.codec.tokenizer import tokenize_row
from toonbridge.constants import trim
from toonbridge.types.core import DecodeResult, DecodeWarning, Record, ToonHeader
from toonbridge.types.errors import TooFewLinesError
from toonbridge.utils.logger import logger

COUNT_MISMATCH = "count_mismatch"


def build_record(header: ToonHeader, tokens: list[str]) -> Record:
    """Zip tokens positionally onto the header's field names.

    Duplicate field names keep their first position and the last value.
    """
    record: Record = {}
    for index, field in enumerate(header.fields):
        token = trim(tokens[index]) if index < len(tokens) else ""
        record[field] = infer_value(token)
    return record


class ToonDecoder:
    """Decoder for TOON documents."""

    def decode(self, toon_str: str) -> DecodeResult:
        """Decode a TOON document.

        Args:
            toon_str: The TOON text (header line plus data rows).

        Returns:
            DecodeResult with the records in row order and any warnings.

        Raises:
            TooFewLinesError: If there is no data line after the header.
            MalformedHeaderError: If the header does not match the grammar.
        """
        lines = trim(toon_str).split("\n")
        if len(lines) < 2:
            raise TooFewLinesError(len(lines) if lines[0] else 0)

        header = parse_header(lines[0])

        records: list[Record] = []
        for line in lines[1:]:
            stripped = trim(line)
            if not stripped:
                continue
            records.append(build_record(header, tokenize_row(stripped)))

        result = DecodeResult(records=records)
        if len(records) != header.count:
            message = f"Header declared {header.count} items but found {len(records)}"
            logger.warning(message)
            result.warnings.append(
                DecodeWarning(
                    code=COUNT_MISMATCH,
                    message=message,
                    declared=header.count,
                    actual=len(records),
                )
            )

        logger.debug(
            f"Decoded {len(records)} records with fields {header.fields!r}"
        )
        return result


_default_decoder = ToonDecoder()


def decode_toon(toon_str: str) -> DecodeResult:
    """Decode with the default decoder, keeping warnings."""
    return _default_decoder.decode(toon_str)


def from_toon(toon_str: str) -> list[Record]:
    """Decode with the default decoder and return only the records."""
    return _default_decoder.decode(toon_str).records
