"""Conversion service tests.

Bug Caught by Each Test:
- test_validation_order_*: Mode checked before input, or size before mode
- test_*_failure_details: Codec errors escape the service instead of becoming 400s
- test_count_mismatch_warning: Advisory warnings dropped from the response
- test_handle_request_*: Non-object bodies reach the dispatcher
"""

import json

import pytest

from toonbridge.config import Settings
from toonbridge.services.conversion_service import (
    HTTP_BAD_REQUEST,
    HTTP_OK,
    INVALID_BODY_MESSAGE,
    INVALID_INPUT_MESSAGE,
    INVALID_MODE_MESSAGE,
    ConversionResponse,
    ConversionService,
    convert,
    get_conversion_service,
    handle_request,
)
from toonbridge.types.core import ConversionMode
from toonbridge.types.errors import ErrorCode, InputValidationError


@pytest.fixture
def service():
    return ConversionService(settings=Settings())


class TestJsonToToon:
    """Tests for the json-to-toon direction."""

    def test_success_body(self, service, users, users_toon):
        input_text = json.dumps(users)
        response = service.convert(input_text, "json-to-toon")

        assert response.status_code == HTTP_OK
        assert response.ok
        assert response.body == {
            "success": True,
            "mode": "json-to-toon",
            "input": input_text,
            "output": users_toon,
        }

    def test_empty_array_outputs_empty_string(self, service):
        response = service.convert("[]", "json-to-toon")
        assert response.ok
        assert response.body["output"] == ""

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constant_failure_details(self, service, constant):
        response = service.convert(f'[{{"a": {constant}}}]', "json-to-toon")

        assert response.status_code == HTTP_BAD_REQUEST
        assert response.body["error"] == "Invalid JSON or conversion failed"
        assert constant in response.body["details"]

    def test_nested_numbers_match_row_numbers(self, service):
        input_text = '[{"a": {"x": 1.0, "y": 0.00001}, "b": 1.0, "c": 0.00001}]'
        response = service.convert(input_text, "json-to-toon")
        assert response.body["output"].split("\n")[1] == r'  {"x":1\,"y":0.00001},1,0.00001'

    def test_deeply_nested_input_failure_details(self, service):
        response = service.convert("[" * 100_000, "json-to-toon")

        assert response.status_code == HTTP_BAD_REQUEST
        assert response.body["error"] == "Invalid JSON or conversion failed"

    def test_invalid_json_failure_details(self, service):
        response = service.convert("{not json", "json-to-toon")

        assert response.status_code == HTTP_BAD_REQUEST
        assert response.body["error"] == "Invalid JSON or conversion failed"
        assert response.body["details"]

    def test_not_an_array_failure_details(self, service):
        response = service.convert('{"a": 1}', "json-to-toon")

        assert response.body == {
            "error": "Invalid JSON or conversion failed",
            "details": "TOON format requires an array of objects",
        }

    def test_element_not_object_failure_details(self, service):
        response = service.convert("[1, 2]", "json-to-toon")
        assert "not primitives or nested arrays" in response.body["details"]


class TestToonToJson:
    """Tests for the toon-to-json direction."""

    def test_success_body(self, service, users, users_toon):
        response = service.convert(users_toon, "toon-to-json")

        assert response.ok
        assert response.body["output"] == json.dumps(users, indent=2)
        assert "warnings" not in response.body

    def test_output_is_pretty_json(self, service, products, products_toon):
        response = service.convert(products_toon, "toon-to-json")
        assert json.loads(response.body["output"]) == products

    def test_non_ascii_kept(self, service):
        response = service.convert("data[1]{city}:\n  Zürich", "toon-to-json")
        assert "Zürich" in response.body["output"]

    def test_small_number_positional(self, service):
        response = service.convert("data[1]{a}:\n  0.00001", "toon-to-json")
        assert response.body["output"] == '[\n  {\n    "a": 0.00001\n  }\n]'

    def test_integral_float_has_no_fraction(self, service):
        response = service.convert("data[1]{a}:\n  " + r'{"x":2.0}', "toon-to-json")
        assert response.body["output"] == '[\n  {\n    "a": {\n      "x": 2\n    }\n  }\n]'

    def test_infinity_becomes_null(self, service):
        response = service.convert("data[1]{a}:\n  Infinity", "toon-to-json")
        assert json.loads(response.body["output"]) == [{"a": None}]

    def test_count_mismatch_warning(self, service):
        response = service.convert("data[3]{a}:\n  1", "toon-to-json")

        assert response.ok
        assert response.body["warnings"] == ["Header declared 3 items but found 1"]

    def test_malformed_header_failure_details(self, service):
        response = service.convert("bad header\n  1", "toon-to-json")

        assert response.status_code == HTTP_BAD_REQUEST
        assert response.body["error"] == "Invalid TOON format or parsing failed"
        assert response.body["details"].startswith("Invalid TOON header format")

    def test_too_few_lines_failure_details(self, service):
        response = service.convert("data[1]{a}:", "toon-to-json")
        assert response.body["details"] == (
            "Invalid TOON format: needs header and at least one data row"
        )


class TestValidation:
    """Tests for request validation."""

    @pytest.mark.parametrize("input_text", [None, "", 123, ["[]"], {"a": 1}])
    def test_invalid_input(self, service, input_text):
        response = service.convert(input_text, "json-to-toon")

        assert response.status_code == HTTP_BAD_REQUEST
        assert response.body == {"error": INVALID_INPUT_MESSAGE}

    @pytest.mark.parametrize("mode", [None, "", "xml", "JSON-TO-TOON", 1])
    def test_invalid_mode(self, service, mode):
        response = service.convert("[]", mode)
        assert response.body == {"error": INVALID_MODE_MESSAGE}

    def test_validation_order_input_before_mode(self, service):
        assert service.convert(None, "xml").body == {"error": INVALID_INPUT_MESSAGE}

    def test_validation_order_mode_before_size(self):
        small = ConversionService(settings=Settings(max_input_length=3))
        assert small.convert("[{}]", "xml").body == {"error": INVALID_MODE_MESSAGE}

    def test_input_over_limit(self):
        small = ConversionService(settings=Settings(max_input_length=10))
        response = small.convert("x" * 11, "toon-to-json")

        assert response.body == {
            "error": "Invalid input: input exceeds maximum length of 10 characters"
        }

    def test_input_at_limit_accepted(self):
        small = ConversionService(settings=Settings(max_input_length=2))
        assert small.convert("[]", "json-to-toon").ok

    def test_validate_request_returns_mode(self, service):
        assert service.validate_request("[]", "toon-to-json") is ConversionMode.TOON_TO_JSON

    def test_validate_request_error_codes(self, service):
        with pytest.raises(InputValidationError) as exc_info:
            service.validate_request(None, "json-to-toon")
        assert exc_info.value.code == ErrorCode.MISSING_ARGS

        small = ConversionService(settings=Settings(max_input_length=1))
        with pytest.raises(InputValidationError) as exc_info:
            small.validate_request("[]", "json-to-toon")
        assert exc_info.value.code == ErrorCode.INPUT_TOO_LARGE


class TestHandleRequest:
    """Tests for raw request bodies."""

    def test_handle_request_text_body(self, service, users_toon):
        body = json.dumps({"input": users_toon, "mode": "toon-to-json"})
        assert service.handle_request(body).ok

    def test_handle_request_bytes_body(self, service):
        body = json.dumps({"input": "[]", "mode": "json-to-toon"}).encode("utf-8")
        assert service.handle_request(body).ok

    def test_handle_request_dict_body(self, service):
        assert service.handle_request({"input": "[]", "mode": "json-to-toon"}).ok

    @pytest.mark.parametrize("body", ["{nope", "[1, 2]", '"text"', "null", None, 42])
    def test_handle_request_invalid_body(self, service, body):
        response = service.handle_request(body)

        assert response.status_code == HTTP_BAD_REQUEST
        assert response.body == {"error": INVALID_BODY_MESSAGE}

    def test_handle_request_deeply_nested_body(self, service):
        response = service.handle_request("[" * 100_000)

        assert response.status_code == HTTP_BAD_REQUEST
        assert response.body == {"error": INVALID_BODY_MESSAGE}

    def test_handle_request_nan_body(self, service):
        response = service.handle_request('{"input": NaN, "mode": "json-to-toon"}')
        assert response.body == {"error": INVALID_BODY_MESSAGE}

    def test_handle_request_missing_fields(self, service):
        assert service.handle_request("{}").body == {"error": INVALID_INPUT_MESSAGE}


class TestModuleFunctions:
    """Tests for the shared-service helpers."""

    def test_shared_service_reused(self):
        assert get_conversion_service() is get_conversion_service()

    def test_convert(self, users, users_toon):
        assert convert(json.dumps(users), "json-to-toon").body["output"] == users_toon

    def test_handle_request(self):
        assert handle_request('{"input": "[]", "mode": "json-to-toon"}').ok

    def test_to_dict_is_copy(self):
        response = ConversionResponse(status_code=HTTP_OK, body={"a": 1})
        response.to_dict()["a"] = 2
        assert response.body == {"a": 1}
