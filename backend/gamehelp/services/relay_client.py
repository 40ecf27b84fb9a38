"""Relay client - the widget's outbound "send message + context" call."""

import httpx

from gamehelp.config import settings
from gamehelp.core.controller import SendFn
from gamehelp.core.errors import RelayError
from gamehelp.services.llm_service import llm_service


class RelayClient:
    """POSTs ``{message, context}`` to the relay and returns ``response``."""

    def __init__(self, url: str, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        self.url = url
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def send(self, message: str, context: str) -> str:
        try:
            resp = await self.client.post(self.url, json={"message": message, "context": context})
        except httpx.HTTPError as e:
            raise RelayError(f"Relay unreachable: {e}") from e

        if not resp.is_success:
            raise RelayError(f"AI server responded with status: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise RelayError("Relay returned malformed JSON") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise RelayError("Relay response has no 'response' text")
        return text

    async def aclose(self) -> None:
        await self.client.aclose()


relay_client: RelayClient | None = None


def get_relay_client() -> RelayClient:
    """Get or create the relay client singleton (lazy init)."""
    global relay_client
    if relay_client is None:
        relay_client = RelayClient(settings.RELAY_URL, timeout=settings.RELAY_TIMEOUT)
    return relay_client


async def close_relay_client() -> None:
    global relay_client
    if relay_client is not None:
        await relay_client.aclose()
        relay_client = None


def build_sender() -> SendFn:
    """The send function for new widgets: remote relay if configured, else in-process."""
    if settings.RELAY_URL:
        return get_relay_client().send
    return llm_service.respond
