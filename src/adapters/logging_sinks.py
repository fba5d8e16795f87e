"""Cloud Logging v2: sinks of one resource node.

Validation is per record: a malformed sink is reported and skipped while
its siblings are still returned.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.domain.models import ResourceKind, ResourceNode, Sink, SinkPayload, parse_record
from core.interfaces.reporter import Reporter, info, warning
from core.json_utils import dump_json, try_parse_object

# Statuses that an inactive (e.g. DELETE_REQUESTED) resource legitimately returns.
_INACTIVE_STATUSES = frozenset({httpx.codes.FORBIDDEN, httpx.codes.NOT_FOUND})


def sinks_path(node_id: str) -> str:
    return f"/v2/{node_id}/sinks"


async def fetch_sinks_for_node(
    client: httpx.AsyncClient,
    raw_node: dict[str, Any],
    kind: ResourceKind,
    reporter: Reporter,
) -> list[Sink]:
    node, invalid_field = parse_record(ResourceNode, raw_node)
    if node is None:
        warning(
            reporter,
            f"Ignoring invalid {kind.label}, missing {invalid_field}: >>>{dump_json(raw_node)}<<<",
        )
        return []

    path = sinks_path(node.node_id)
    response = await client.get(path)
    content = response.text
    url = str(response.url)
    status = f"{response.status_code} {response.reason_phrase}".strip()

    if response.status_code in _INACTIVE_STATUSES and node.state is not None:
        info(reporter, f"Ignoring {kind.label}: '{node.display_name}', {node.state}, {status}")
        return []

    if not response.is_success:
        warning(
            reporter,
            f"Ignoring {kind.label}, couldn't get sinks, unsuccessful status code: "
            f"'{url}' {status} >>>{dump_json(raw_node)}<<< >>>{content}<<<",
        )
        return []

    body, ok = try_parse_object(content)
    items = body.get("sinks") if ok else None
    if not isinstance(items, list):
        warning(
            reporter,
            f"Ignoring {kind.label}, couldn't get sinks, couldn't parse json: "
            f"'{url}' {status} >>>{dump_json(raw_node)}<<< >>>{content}<<<",
        )
        return []

    sinks: list[Sink] = []
    for item in items:
        payload, invalid_field = parse_record(SinkPayload, item)
        if payload is None:
            if invalid_field == "object":
                warning(reporter, f"Ignoring invalid sink: {dump_json(item)}")
            else:
                warning(reporter, f"Ignoring invalid sink, missing {invalid_field}: {dump_json(item)}")
            continue
        sinks.append(Sink.from_payload(payload, node=node))
    return sinks
