"""httpx wrapper for the Google Cloud REST APIs.

One builder for every client keeps headers, timeouts and authentication
identical across the Resource Manager and Logging APIs. Tests can pass a
`transport` to run against an in-memory handler.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    base_url: str,
    access_token: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a bearer-authenticated `httpx.AsyncClient` rooted at `base_url`.

    The token is sent as-is; acquiring and refreshing it is up to the caller
    (e.g. `gcloud auth application-default print-access-token`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "Authorization": f"Bearer {access_token}",
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )
