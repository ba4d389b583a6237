"""HTTP delivery of telemetry envelopes."""

import os

import httpx

from million_telemetry.schema import Envelope

DEFAULT_ENDPOINT = "https://telemetry.million.dev/api/v1/record"

# Telemetry must never hold up the caller for long
DEFAULT_TIMEOUT = httpx.Timeout(
    connect=2.0,
    read=5.0,
    write=5.0,
    pool=2.0,
)


class TransportError(Exception):
    """Telemetry delivery error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def get_endpoint() -> str:
    """Collection endpoint, overridable with ``MILLION_TELEMETRY_ENDPOINT``."""
    return os.environ.get("MILLION_TELEMETRY_ENDPOINT") or DEFAULT_ENDPOINT


async def post(
    envelope: Envelope,
    endpoint: str | None = None,
    timeout: httpx.Timeout = DEFAULT_TIMEOUT,
) -> None:
    """Send an envelope to the collection endpoint.

    Args:
        envelope: Envelope to deliver
        endpoint: Collection URL (defaults to ``get_endpoint()``)
        timeout: Request timeout settings

    Raises:
        TransportError: If the request fails or the endpoint rejects it
    """
    url = endpoint or get_endpoint()

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url, json=envelope.to_dict())
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"Telemetry endpoint returned {e.response.status_code}",
            status_code=e.response.status_code,
        ) from e
    except httpx.HTTPError as e:
        raise TransportError(f"Telemetry request failed: {e}") from e
