"""Tests for content type extraction and the body codec."""

import json
from xml.etree import ElementTree as ET

import pytest

from quotes.api.codec import decode, decode_response, encode
from quotes.api.content_types import ContentType, content_type, mime_type
from quotes.api.types import ERROR, ApiResponse, TransportFailure


class TestContentType:
    """Test Content-Type extraction from header lists."""

    def test_default_is_json(self):
        assert content_type([]) == "application/json"

    def test_plain_value(self):
        assert content_type([("Content-Type", "plain/text")]) == "plain/text"

    def test_parameters_are_stripped(self):
        assert content_type([("Content-Type", "application/xml; charset=utf-8")]) == "application/xml"

    def test_finds_header_after_others(self):
        headers = [("Server", "GitHub.com"), ("Content-Type", "application/xml; charset=utf-8")]
        assert content_type(headers) == "application/xml"

    def test_key_match_is_case_sensitive(self):
        assert content_type([("content-type", "application/xml")]) == "application/json"

    def test_mime_type(self):
        assert mime_type("application/json; charset=utf-8") == "application/json"

    @pytest.mark.parametrize("mime,expected", [
        ("application/json", ContentType.JSON),
        ("application/xml", ContentType.XML),
        ("application/x-www-form-urlencoded", ContentType.FORM),
        ("text/html", ContentType.OTHER),
        (ContentType.XML, ContentType.XML),
    ])
    def test_from_mime(self, mime, expected):
        assert ContentType.from_mime(mime) is expected


class TestEncode:

    def test_json(self):
        assert encode({"a": 1}, "application/json") == '{"a":1}'

    def test_xml_passes_through(self):
        assert encode("<xml/>", "application/xml") == "<xml/>"

    def test_form(self):
        assert encode({"a": "o ne"}, "application/x-www-form-urlencoded") == "a=o+ne"

    def test_other_passes_through(self):
        assert encode("goop", "application/mytsuff") == "goop"

    def test_accepts_enum(self):
        assert encode({"a": [1, 2]}, ContentType.JSON) == '{"a":[1,2]}'

    def test_json_then_decode(self):
        data = {"contents": {"quotes": [{"quote": "Be yourself."}]}, "n": 3}
        result = decode(200, encode(data, "application/json"), "application/json")
        assert result.body == data


class TestDecode:
    """Test response body decoding."""

    def test_json(self):
        result = decode(ERROR, '{"a": 1}', "application/json")
        assert result.status == ERROR
        assert result.body == {"a": 1}

    def test_json_keeps_status(self):
        result = decode(200, '{"a": 1}', "application/json")
        assert (result.status, result.body) == (200, {"a": 1})
        assert result.original_status is None

    def test_empty_body(self):
        result = decode(500, "", "application/json")
        assert (result.status, result.body) == (500, "")

    @pytest.mark.parametrize("mime", ["application/json", "application/xml", "text/plain"])
    def test_empty_body_any_type(self, mime):
        result = decode(204, "", mime)
        assert (result.status, result.body) == (204, "")

    def test_malformed_json(self):
        result = decode(200, "{goop}", "application/json")
        assert (result.status, result.body) == (ERROR, "{goop}")
        assert result.original_status == 200
        assert result.is_decode_failure

    def test_malformed_json_on_error(self):
        result = decode(ERROR, "{goop}", "application/json")
        assert (result.status, result.body) == (ERROR, "{goop}")

    def test_marker_body_passes_through(self):
        failure = TransportFailure("nxdomain")
        result = decode(ERROR, failure, "application/dontcare")
        assert (result.status, result.body) == (ERROR, failure)
        assert result.is_transport_failure

    def test_xml(self):
        result = decode(200, "<quote author='Oscar'>Be yourself.</quote>", "application/xml")
        assert result.status == 200
        assert isinstance(result.body, ET.Element)
        assert result.body.tag == "quote"
        assert result.body.text == "Be yourself."
        assert result.body.get("author") == "Oscar"

    def test_malformed_xml(self):
        result = decode(200, "<quote>", "application/xml")
        assert (result.status, result.body) == (ERROR, "<quote>")

    def test_other_type_unchanged(self):
        result = decode(200, "just text", "text/plain")
        assert (result.status, result.body) == (200, "just text")

    def test_bytes_json(self):
        result = decode(200, json.dumps({"k": "v"}).encode(), "application/json")
        assert result.body == {"k": "v"}

    def test_decode_response_reads_headers(self):
        response = ApiResponse(200, "<a/>", [("Content-Type", "application/xml; charset=utf-8")])
        result = decode_response(response)
        assert result.body.tag == "a"

    def test_decode_response_defaults_to_json(self):
        result = decode_response(ApiResponse(200, '{"x": true}', []))
        assert result.body == {"x": True}
