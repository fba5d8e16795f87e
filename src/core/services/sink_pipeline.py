"""Sink collection orchestration.

Why it lives in services:
- The CLI only parses arguments and renders; fetching and aggregation stay
  here so tests and other entry points can call `collect_sinks` directly.
- Adapters do one HTTP call each; this module decides how many run at once.

Two-level fan-out over the Google Cloud resource hierarchy:

1. the three resource kinds (organizations, folders, projects) are searched
   concurrently;
2. as soon as a kind's search completes, one sinks request per node is
   launched concurrently and awaited together.

Each task builds and returns its own list; aggregation happens after each
group completes, so nothing is shared between tasks. Problems with a single
response are reported and contribute no sinks; exceptions (transport
failures) propagate to the caller untouched.
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, Sequence

import httpx

from adapters.http_client import build_async_client
from adapters.logging_sinks import fetch_sinks_for_node
from adapters.resource_manager import fetch_nodes
from core.config import AppSettings
from core.domain.models import RESOURCE_KINDS, ResourceKind, Sink
from core.interfaces.reporter import Reporter


def _flatten(groups: Iterable[Sequence[Sink]]) -> list[Sink]:
    return [sink for group in groups for sink in group]


async def collect_sinks(
    *,
    settings: AppSettings,
    access_token: str,
    reporter: Reporter,
    kinds: Sequence[ResourceKind] = RESOURCE_KINDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Sink]:
    """Return every sink visible to `access_token`, in kind then node order."""

    semaphore = asyncio.Semaphore(settings.max_concurrency) if settings.max_concurrency else None

    async with build_async_client(
        settings,
        base_url=settings.resource_manager_base_url,
        access_token=access_token,
        transport=transport,
    ) as resource_client, build_async_client(
        settings,
        base_url=settings.logging_base_url,
        access_token=access_token,
        transport=transport,
    ) as logging_client:

        async def node_sinks(raw_node: dict[str, Any], kind: ResourceKind) -> list[Sink]:
            if semaphore is None:
                return await fetch_sinks_for_node(logging_client, raw_node, kind, reporter)
            async with semaphore:
                return await fetch_sinks_for_node(logging_client, raw_node, kind, reporter)

        async def kind_sinks(kind: ResourceKind) -> list[Sink]:
            nodes = await fetch_nodes(resource_client, kind, reporter)
            results = await asyncio.gather(*(node_sinks(node, kind) for node in nodes))
            return _flatten(results)

        per_kind = await asyncio.gather(*(kind_sinks(kind) for kind in kinds))

    return _flatten(per_kind)
