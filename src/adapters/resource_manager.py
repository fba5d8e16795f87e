"""Cloud Resource Manager v3: resource discovery.

Lists the organizations, folders or projects visible to the token through
the `:search` endpoints. Every failure mode degrades to "this kind has no
nodes": callers with partial IAM grants (no org-level visibility, say) still
get folder and project results.

Transport errors (DNS, connection refused) are not handled here.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.domain.models import ResourceKind
from core.interfaces.reporter import Reporter, info, warning
from core.json_utils import dump_json, try_parse_object


def _unauthorized_message(response: httpx.Response) -> str | None:
    if response.status_code != httpx.codes.UNAUTHORIZED:
        return None
    body, ok = try_parse_object(response.text)
    if not ok:
        return None
    error = body.get("error")
    if not isinstance(error, dict) or error.get("message") is None:
        return None
    return str(error["message"])


async def fetch_nodes(
    client: httpx.AsyncClient,
    kind: ResourceKind,
    reporter: Reporter,
) -> list[dict[str, Any]]:
    """Fetch the raw nodes of one resource kind.

    Returns the JSON objects of the `<collection_key>` array unvalidated;
    per-node validation happens when the node's sinks are fetched.
    """

    response = await client.get(kind.search_path)
    content = response.text
    url = str(response.url)
    status = f"{response.status_code} {response.reason_phrase}".strip()

    message = _unauthorized_message(response)
    if message is not None:
        warning(reporter, f"Ignoring all {kind.label} sinks: {message}")
        return []

    if not response.is_success:
        warning(
            reporter,
            f"Ignoring all {kind.label} sinks, couldn't get {kind.collection_key}, "
            f"unsuccessful status code: '{url}' {status} >>>{content}<<<",
        )
        return []

    body, ok = try_parse_object(content)
    items = body.get(kind.collection_key) if ok else None
    if not isinstance(items, list):
        warning(
            reporter,
            f"Ignoring all {kind.label} sinks, couldn't get {kind.collection_key}, "
            f"couldn't parse json: '{url}' {status} >>>{content}<<<",
        )
        return []

    info(reporter, f"Got {len(items)} {kind.collection_key}.")

    nodes: list[dict[str, Any]] = []
    for item in items:
        if isinstance(item, dict):
            nodes.append(item)
        else:
            warning(reporter, f"Ignoring invalid {kind.label}: {dump_json(item)}")
    return nodes
