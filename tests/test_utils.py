"""Tests for shared helpers and error payload parsing."""
from datetime import datetime

import httpx

from app.core.errors import extract_message
from app.utils import format_date, parse_json, unwrap_payload


def make_response(status=200, content=b"", headers=None):
    return httpx.Response(status, content=content, headers=headers, request=httpx.Request("GET", "http://x.test/"))


class TestParseJson:
    def test_empty_body(self):
        assert parse_json(make_response(204)) == {}

    def test_not_json(self):
        assert parse_json(make_response(500, b"<html>oops</html>")) == {}

    def test_json(self):
        assert parse_json(make_response(200, b'[{"id": "1"}]')) == [{"id": "1"}]


class TestUnwrapPayload:
    def test_envelope(self):
        assert unwrap_payload({"success": True, "data": [1, 2]}) == [1, 2]

    def test_plain_list(self):
        assert unwrap_payload([1, 2]) == [1, 2]

    def test_failed_envelope_untouched(self):
        data = {"success": False, "data": None, "message": "nope"}
        assert unwrap_payload(data) == data


class TestFormatDate:
    def test_crosses_midnight_in_madrid(self):
        assert format_date("2024-01-15T23:30:00Z") == "16/01/2024"

    def test_naive_is_utc(self):
        assert format_date(datetime(2024, 7, 1, 12, 0)) == "01/07/2024"

    def test_explicit_timezone(self):
        assert format_date("2024-01-15T23:30:00Z", "UTC") == "15/01/2024"

    def test_not_a_date(self):
        assert format_date("mañana") == "mañana"

    def test_empty(self):
        assert format_date(None) == ""
        assert format_date("") == ""


class TestExtractMessage:
    def test_message(self):
        assert extract_message({"message": "Email ya registrado"}, "x") == "Email ya registrado"

    def test_message_list(self):
        assert extract_message({"message": ["name vacío", "email inválido"]}, "x") == "name vacío; email inválido"

    def test_error_field(self):
        assert extract_message({"error": "Bad Request"}, "x") == "Bad Request"

    def test_default(self):
        assert extract_message({}, "Error al obtener miembros") == "Error al obtener miembros"
        assert extract_message([1, 2], "fallback") == "fallback"
