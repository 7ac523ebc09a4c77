"""Header line tests."""

import pytest

from toonbridge.codec.header import format_header, parse_header
from toonbridge.types.core import ToonHeader
from toonbridge.types.errors import ErrorCode, MalformedHeaderError


class TestFormatHeader:
    def test_default_name(self):
        assert format_header(2, ["id", "name"]) == "data[2]{id,name}:"

    def test_custom_name(self):
        assert format_header(0, ["a"], name="rows") == "rows[0]{a}:"

    def test_fields_written_verbatim(self):
        assert format_header(1, ["first name", "e-mail"]) == "data[1]{first name,e-mail}:"


class TestParseHeader:
    def test_parses_all_parts(self):
        header = parse_header("users[12]{id,name,role}:")

        assert header == ToonHeader(name="users", count=12, fields=["id", "name", "role"])

    def test_fields_stripped(self):
        assert parse_header("data[1]{ a ,b }:").fields == ["a", "b"]

    def test_fields_not_deduplicated(self):
        assert parse_header("data[1]{a,a}:").fields == ["a", "a"]

    def test_empty_field_between_commas(self):
        assert parse_header("data[1]{a,,b}:").fields == ["a", "", "b"]

    def test_leading_zero_count(self):
        assert parse_header("data[007]{a}:").count == 7

    def test_single_carriage_return_tolerated(self):
        assert parse_header("data[1]{a}:\r").fields == ["a"]

    def test_double_carriage_return_rejected(self):
        with pytest.raises(MalformedHeaderError):
            parse_header("data[1]{a}:\r\r")

    def test_non_ascii_name_rejected(self):
        with pytest.raises(MalformedHeaderError):
            parse_header("données[1]{a}:")

    def test_leading_whitespace_rejected(self):
        with pytest.raises(MalformedHeaderError):
            parse_header(" data[1]{a}:")

    def test_error_carries_context(self):
        with pytest.raises(MalformedHeaderError) as exc_info:
            parse_header("nope")

        error = exc_info.value
        assert error.code == ErrorCode.MALFORMED_HEADER
        assert error.context.line_number == 1
        assert error.context.additional_info["header"] == "nope"
        assert error.user_message == "Invalid TOON format or parsing failed"


class TestToonHeader:
    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            ToonHeader(name="data", count=-1, fields=["a"])

    def test_frozen(self):
        header = ToonHeader(name="data", count=1, fields=["a"])
        with pytest.raises(AttributeError):
            header.count = 2
