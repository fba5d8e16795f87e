"""Domain models (Pydantic v2).

These models describe *what* the data is (resource kinds, resource nodes and
logging sinks), not *how* it is fetched.

Notes:
- API payloads are untrusted JSON. `parse_record` validates a raw value into
  one of these models exactly once and reports the first offending field
  instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, Field, StrictStr, ValidationError, field_validator
from pydantic.config import ConfigDict


@dataclass(frozen=True)
class ResourceKind:
    """A Resource Manager resource kind and the endpoint that lists it."""

    search_path: str
    collection_key: str
    label: str


ORGANIZATIONS = ResourceKind(
    search_path="/v3/organizations:search",
    collection_key="organizations",
    label="organization",
)
FOLDERS = ResourceKind(
    search_path="/v3/folders:search",
    collection_key="folders",
    label="folder",
)
PROJECTS = ResourceKind(
    search_path="/v3/projects:search",
    collection_key="projects",
    label="project",
)

RESOURCE_KINDS: tuple[ResourceKind, ...] = (ORGANIZATIONS, FOLDERS, PROJECTS)


class ResourceNode(BaseModel):
    """An organization, folder or project returned by a search endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr = Field(
        ...,
        description="Resource identifier, e.g. 'organizations/123' or 'projects/456'.",
    )
    display_name: StrictStr = Field(
        ...,
        alias="displayName",
        description="Human readable name of the resource.",
    )
    state: str | None = Field(
        default=None,
        description="Lifecycle state (ACTIVE, DELETE_REQUESTED, ...), if reported.",
    )

    @field_validator("state", mode="before")
    @classmethod
    def _state_as_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, (dict, list)):
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @property
    def node_id(self) -> str:
        return self.name


class SinkPayload(BaseModel):
    """One element of the `sinks` array returned by the Logging API."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    destination: StrictStr
    filter: StrictStr


class Sink(BaseModel):
    """A logging sink together with the resource it is attached to."""

    model_config = ConfigDict(frozen=True)

    node_id: str = Field(..., description="Identifier of the owning resource.")
    node_name: str = Field(..., description="Display name of the owning resource.")
    name: str = Field(..., description="Sink name.")
    destination: str = Field(..., description="Export destination (bucket, dataset, topic...).")
    filter: str = Field(..., description="Advanced logs filter selecting exported entries.")

    @classmethod
    def from_payload(cls, payload: SinkPayload, *, node: ResourceNode) -> "Sink":
        return cls(
            node_id=node.node_id,
            node_name=node.display_name,
            name=payload.name,
            destination=payload.destination,
            filter=payload.filter,
        )


ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_record(model: type[ModelT], raw: object) -> tuple[ModelT | None, str | None]:
    """Validate `raw` into `model`.

    Returns `(record, None)` on success and `(None, field)` on failure, where
    `field` names the first missing or invalid field (`"object"` when `raw` is
    not a JSON object at all).
    """

    if not isinstance(raw, dict):
        return None, "object"
    try:
        return model.model_validate(raw), None
    except ValidationError as exc:
        errors = exc.errors()
        if errors and errors[0].get("loc"):
            return None, str(errors[0]["loc"][0])
        return None, "object"
