"""Twitter Direct Message Client — DirectMessageSender over the v1.1 DM events endpoint.

Invariants:
    - 2xx → success, nothing returned
    - Non-2xx with a JSON `errors` list → ProviderRejection (entries in provider order)
    - Non-2xx without one, or any httpx transport failure → TransportError
    - No retries here: retry policy belongs to the error classifier

Design Decisions:
    - httpx.AsyncClient injected transport: tests swap in httpx.MockTransport
    - Credentials never logged (DmCredentials.__repr__ masks the token)
"""

import logging

import httpx

from notifier.core.domain_types import DmCredentials, UserId
from notifier.core.errors import ErrorContext, TransportError
from notifier.core.provider_errors import ProviderRejection, parse_error_entries

logger = logging.getLogger(__name__)

DM_EVENTS_PATH = "/direct_messages/events/new.json"


def build_message_event(recipient_id: str, text: str) -> dict:
    return {
        "event": {
            "type": "message_create",
            "message_create": {
                "target": {"recipient_id": recipient_id},
                "message_data": {"text": text},
            },
        },
    }


class TwitterDirectMessageClient:
    """Sends direct messages on behalf of a user."""

    def __init__(
        self,
        base_url: str = "https://api.twitter.com/1.1",
        timeout_seconds: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds, transport=transport,
        )

    async def create_direct_message(
        self, credentials: DmCredentials, recipient_id: UserId, text: str,
    ) -> None:
        ctx = ErrorContext(user_id=recipient_id)
        try:
            response = await self.client.post(
                DM_EVENTS_PATH,
                json=build_message_event(recipient_id, text),
                headers={"Authorization": f"Bearer {credentials.access_token}"},
            )
        except httpx.TransportError as e:
            raise TransportError(f"{type(e).__name__}: {e}", ctx) from e

        if response.is_success:
            return

        try:
            body = response.json()
        except ValueError:
            body = None
        entries = parse_error_entries(body)
        if entries is None:
            logger.warning(
                f"Provider answered HTTP {response.status_code} without an error list",
                extra={"user_id": recipient_id},
            )
            raise TransportError(f"HTTP {response.status_code} without provider errors", ctx)
        raise ProviderRejection(entries, response.status_code)

    async def aclose(self) -> None:
        await self.client.aclose()
