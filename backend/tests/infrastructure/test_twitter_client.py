"""Twitter DM client — tests against httpx.MockTransport.

Tests cover:
    - Request shape: path, bearer header, message_create event body
    - 2xx returns normally
    - Structured error bodies → ProviderRejection with ordered entries
    - Unstructured error bodies and transport failures → TransportError
"""

import json

import httpx
import pytest

from notifier.core.domain_types import DmCredentials, UserId
from notifier.core.errors import TransportError
from notifier.core.provider_errors import ProviderErrorEntry, ProviderRejection
from notifier.infrastructure.twitter_client import TwitterDirectMessageClient

CREDS = DmCredentials(access_token="user-token")


def _client(handler):
    return TwitterDirectMessageClient(
        base_url="https://api.example.test/1.1",
        transport=httpx.MockTransport(handler),
    )


async def test_posts_message_create_event():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"event": {"id": "1"}})

    client = _client(handler)
    await client.create_direct_message(CREDS, UserId("1001"), "hello")
    await client.aclose()

    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/1.1/direct_messages/events/new.json"
    assert request.headers["Authorization"] == "Bearer user-token"
    assert json.loads(request.content) == {
        "event": {
            "type": "message_create",
            "message_create": {
                "target": {"recipient_id": "1001"},
                "message_data": {"text": "hello"},
            },
        },
    }


async def test_structured_errors_become_rejection():
    def handler(request):
        return httpx.Response(403, json={"errors": [
            {"code": 89, "message": "Invalid or expired token."},
            {"code": 130, "message": "Over capacity"},
        ]})

    with pytest.raises(ProviderRejection) as exc_info:
        await _client(handler).create_direct_message(CREDS, UserId("1001"), "hi")
    assert exc_info.value.status_code == 403
    assert exc_info.value.entries == [
        ProviderErrorEntry(89, "Invalid or expired token."),
        ProviderErrorEntry(130, "Over capacity"),
    ]


async def test_html_error_page_is_transport_error():
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(TransportError, match="502"):
        await _client(handler).create_direct_message(CREDS, UserId("1001"), "hi")


async def test_json_without_errors_is_transport_error():
    def handler(request):
        return httpx.Response(500, json={"detail": "boom"})

    with pytest.raises(TransportError):
        await _client(handler).create_direct_message(CREDS, UserId("1001"), "hi")


async def test_connection_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc_info:
        await _client(handler).create_direct_message(CREDS, UserId("1001"), "hi")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.context.user_id == "1001"
