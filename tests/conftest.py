import httpx
import pytest

from restassert import ExtractableResponse


def make_response(body, content_type=None, status_code=200, headers=None):
    headers = list(headers or [])
    if content_type is not None:
        headers.append(("Content-Type", content_type))
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = httpx.Response(status_code, headers=headers, content=body)
    return ExtractableResponse(response)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def json_response():
    return make_response(
        '{"a": {"b": 1}, "items": [{"id": 1}, {"id": 2}], "empty": null}',
        content_type="application/json; charset=utf-8",
    )


@pytest.fixture
def xml_response():
    return make_response(
        "<root><item>x</item></root>",
        content_type="application/xml",
    )


@pytest.fixture
def html_response():
    return make_response(
        "<ul><li>a</li><li>b</li></ul>",
        content_type="text/html",
    )


@pytest.fixture
def mock_client():
    """Client answering every request from a canned JSON payload."""

    def handler(request):
        return httpx.Response(
            200,
            json={"method": request.method, "path": request.url.path},
            headers={"X-Request-Id": "abc"},
        )

    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield client
    client.close()
