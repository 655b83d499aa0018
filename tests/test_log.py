import json

import httpx
from structlog.testing import capture_logs

from restassert.logic.log import PLACEHOLDER, format_body, log_request, log_response
from restassert.model import RequestLogLevel, ResponseLogLevel


def events(logs):
    return [entry["event"] for entry in logs]


class TestFormatBody:
    def test_json_is_indented(self):
        text = format_body('{"a":{"b":1}}', "application/json")
        assert text == json.dumps({"a": {"b": 1}}, indent=2)

    def test_missing_content_type_is_json(self):
        assert json.loads(format_body("[1,2]", None)) == [1, 2]

    def test_unreadable_json_is_a_placeholder(self):
        assert format_body("{bad", "application/json") == json.dumps(PLACEHOLDER)
        assert format_body("null", "application/json") == json.dumps(PLACEHOLDER)

    def test_xml_is_pretty_printed(self):
        text = format_body("<r><n>1</n></r>", "application/xml")
        assert text == "<r>\n  <n>1</n>\n</r>\n"

    def test_malformed_xml_is_logged_raw(self):
        assert format_body("<r>", "text/xml") == "<r>"

    def test_other_content_is_logged_raw(self):
        assert format_body("a,b\n1,2", "text/csv") == "a,b\n1,2"


class TestLogRequest:
    def make_request(self):
        return httpx.Request(
            "POST",
            "https://api.example.com/items",
            json={"name": "x"},
            headers={"X-Trace": "t1"},
        )

    def test_none(self):
        with capture_logs() as logs:
            log_request(self.make_request(), RequestLogLevel.NONE)
        assert logs == []

    def test_endpoint(self):
        with capture_logs() as logs:
            log_request(self.make_request(), RequestLogLevel.ENDPOINT)
        assert events(logs) == ["Request"]
        assert logs[0]["method"] == "POST"
        assert logs[0]["url"] == "https://api.example.com/items"

    def test_headers(self):
        with capture_logs() as logs:
            log_request(self.make_request(), RequestLogLevel.HEADERS)
        assert events(logs) == ["Request", "Request headers"]
        assert logs[1]["content_type"] == "application/json"
        assert logs[1]["headers"]["x-trace"] == "t1"

    def test_body(self):
        with capture_logs() as logs:
            log_request(self.make_request(), RequestLogLevel.BODY)
        assert events(logs) == ["Request", "Request body"]
        assert json.loads(logs[1]["body"]) == {"name": "x"}

    def test_all(self):
        with capture_logs() as logs:
            log_request(self.make_request(), RequestLogLevel.ALL)
        assert events(logs) == ["Request", "Request headers", "Request body"]

    def test_request_without_body(self):
        request = httpx.Request("GET", "https://api.example.com/items")
        with capture_logs() as logs:
            log_request(request, RequestLogLevel.ALL)
        assert events(logs) == ["Request", "Request headers"]


class TestLogResponse:
    def make_response(self):
        return httpx.Response(
            201,
            content=b"<r><id>5</id></r>",
            headers={"Content-Type": "application/xml"},
        )

    def test_none(self):
        with capture_logs() as logs:
            log_response(self.make_response(), ResponseLogLevel.NONE)
        assert logs == []

    def test_status(self):
        with capture_logs() as logs:
            log_response(self.make_response(), ResponseLogLevel.STATUS)
        assert events(logs) == ["Response"]
        assert logs[0]["status_code"] == 201
        assert logs[0]["reason"] == "Created"

    def test_all(self):
        with capture_logs() as logs:
            log_response(self.make_response(), ResponseLogLevel.ALL)
        assert events(logs) == ["Response", "Response headers", "Response body"]
        assert "<id>5</id>" in logs[2]["body"]


class TestLogLevels:
    def test_ordering(self):
        assert RequestLogLevel.ALL > RequestLogLevel.BODY > RequestLogLevel.ENDPOINT
        assert RequestLogLevel.NONE < RequestLogLevel.ENDPOINT
        assert ResponseLogLevel.STATUS >= ResponseLogLevel.STATUS
        assert ResponseLogLevel.HEADERS <= ResponseLogLevel.ALL
