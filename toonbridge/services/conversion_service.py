"""Conversion service: the request/response boundary around the TOON codec.

Takes a raw ``{"input": ..., "mode": ...}`` request, dispatches to the
encoder or decoder, and always returns a ``ConversionResponse``; no codec
or JSON error escapes this module.

Usage:
    from toonbridge.services.conversion_service import convert

    response = convert('[{"id":1}]', "json-to-toon")
    response.status_code   # 200
    response.to_dict()     # {"success": True, "mode": ..., "input": ..., "output": "data[1]{id}:\\n  1"}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from toonbridge.codec.decoder import ToonDecoder
from toonbridge.codec.encoder import ToonEncoder
from toonbridge.codec.json_text import dumps, loads
from toonbridge.config import Settings, get_settings
from toonbridge.types.core import ConversionMode
from toonbridge.types.errors import ErrorCode, InputValidationError
from toonbridge.utils.logger import logger, with_correlation_id
from toonbridge.utils.serialization import serialize_to_primitives

HTTP_OK = 200
HTTP_BAD_REQUEST = 400

INVALID_INPUT_MESSAGE = "Invalid input: input is required and must be a string"
INVALID_MODE_MESSAGE = 'Invalid mode: must be either "json-to-toon" or "toon-to-json"'
INVALID_BODY_MESSAGE = "Invalid JSON body"

FAILURE_MESSAGES = {
    ConversionMode.JSON_TO_TOON: "Invalid JSON or conversion failed",
    ConversionMode.TOON_TO_JSON: "Invalid TOON format or parsing failed",
}


@dataclass
class ConversionResponse:
    """Outcome of one conversion request."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code == HTTP_OK

    def to_dict(self) -> dict[str, Any]:
        return dict(self.body)


def _bad_request(error: str, details: str | None = None) -> ConversionResponse:
    body: dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return ConversionResponse(status_code=HTTP_BAD_REQUEST, body=body)


class ConversionService:
    """Dispatches conversion requests to the TOON encoder or decoder.

    Attributes:
        encoder: Encoder used for ``json-to-toon``.
        decoder: Decoder used for ``toon-to-json``.
        settings: Runtime settings (input size limit).
    """

    def __init__(
        self,
        encoder: ToonEncoder | None = None,
        decoder: ToonDecoder | None = None,
        settings: Settings | None = None,
    ):
        self.encoder = encoder or ToonEncoder()
        self.decoder = decoder or ToonDecoder()
        self.settings = settings or get_settings()

    def validate_request(self, input_text: Any, mode: Any) -> ConversionMode:
        """Check a request before any conversion work.

        Raises:
            InputValidationError: For a missing/non-string input, an input
                over the size limit, or an unknown mode.
        """
        if not input_text or not isinstance(input_text, str):
            raise InputValidationError(INVALID_INPUT_MESSAGE, code=ErrorCode.MISSING_ARGS)

        try:
            resolved = ConversionMode(mode)
        except ValueError:
            raise InputValidationError(INVALID_MODE_MESSAGE) from None

        limit = self.settings.max_input_length
        if len(input_text) > limit:
            raise InputValidationError(
                f"Invalid input: input exceeds maximum length of {limit} characters",
                code=ErrorCode.INPUT_TOO_LARGE,
            )
        return resolved

    def convert(self, input_text: Any, mode: Any) -> ConversionResponse:
        """Convert ``input_text`` in the direction given by ``mode``.

        Returns:
            200 with ``{"success", "mode", "input", "output"}`` (plus
            ``"warnings"`` when decoding produced any), or 400 with
            ``{"error"}`` for invalid requests and ``{"error", "details"}``
            for conversion failures.
        """
        try:
            resolved = self.validate_request(input_text, mode)
        except InputValidationError as e:
            logger.info(f"Rejected conversion request: {e}")
            return _bad_request(str(e))

        with with_correlation_id(operation=resolved.value):
            try:
                output, warnings = self._dispatch(input_text, resolved)
            except Exception as e:
                logger.info(f"Conversion failed ({resolved.value}): {e}")
                return _bad_request(FAILURE_MESSAGES[resolved], str(e) or "Unknown error")

            body: dict[str, Any] = {
                "success": True,
                "mode": resolved.value,
                "input": input_text,
                "output": output,
            }
            if warnings:
                body["warnings"] = warnings
            logger.debug(f"Conversion succeeded ({resolved.value}), {len(output)} chars out")
            return ConversionResponse(status_code=HTTP_OK, body=body)

    def _dispatch(self, input_text: str, mode: ConversionMode) -> tuple[str, list[str]]:
        if mode is ConversionMode.JSON_TO_TOON:
            return self.encoder.encode(loads(input_text)), []

        result = self.decoder.decode(input_text)
        output = dumps(serialize_to_primitives(result.records), indent=2)
        return output, [w.message for w in result.warnings]

    def handle_request(self, body: str | bytes | dict[str, Any] | None) -> ConversionResponse:
        """Handle a raw request body.

        Accepts JSON text (``str``/``bytes``) or an already-parsed dict. A body
        that is not a JSON object yields 400 ``{"error": "Invalid JSON body"}``.
        """
        if isinstance(body, (str, bytes, bytearray)):
            try:
                body = loads(body)
            except (ValueError, RecursionError):
                return _bad_request(INVALID_BODY_MESSAGE)

        if not isinstance(body, dict):
            return _bad_request(INVALID_BODY_MESSAGE)

        return self.convert(body.get("input"), body.get("mode"))


_default_service: ConversionService | None = None


def get_conversion_service() -> ConversionService:
    """Return the shared service, creating it on first use."""
    global _default_service
    if _default_service is None:
        _default_service = ConversionService()
    return _default_service


def convert(input_text: Any, mode: Any) -> ConversionResponse:
    """Convert using the shared service."""
    return get_conversion_service().convert(input_text, mode)


def handle_request(body: str | bytes | dict[str, Any] | None) -> ConversionResponse:
    """Handle a raw request body using the shared service."""
    return get_conversion_service().handle_request(body)
