from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from core.config import AppSettings
from core.domain.severity import Severity

RESOURCE_MANAGER = "https://cloudresourcemanager.googleapis.com"
LOGGING = "https://logging.googleapis.com"


@dataclass
class RecordingReporter:
    """Reporter that keeps every line in memory."""

    lines: list[tuple[Severity, str]] = field(default_factory=list)

    def report(self, severity: Severity, message: str) -> None:
        self.lines.append((severity, message))

    def messages(self, severity: Severity) -> list[str]:
        return [message for level, message in self.lines if level is severity]

    @property
    def infos(self) -> list[str]:
        return self.messages(Severity.INFO)

    @property
    def warnings(self) -> list[str]:
        return self.messages(Severity.WARNING)

    @property
    def errors(self) -> list[str]:
        return self.messages(Severity.ERROR)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def access_token() -> str:
    return "ya29.test-token"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        resource_manager_base_url=RESOURCE_MANAGER,
        logging_base_url=LOGGING,
    )


@pytest.fixture
def organization() -> dict[str, Any]:
    return {
        "name": "organizations/1234",
        "displayName": "acme.com",
        "state": "ACTIVE",
        "directoryCustomerId": "C0abc",
    }


@pytest.fixture
def folder() -> dict[str, Any]:
    return {
        "name": "folders/5678",
        "displayName": "Retired",
        "parent": "organizations/1234",
        "state": "DELETE_REQUESTED",
    }


@pytest.fixture
def sample_sinks() -> list[dict[str, Any]]:
    return [
        {
            "name": "audit-to-bq",
            "destination": "bigquery.googleapis.com/projects/sec/datasets/audit",
            "filter": 'logName:"cloudaudit.googleapis.com"',
            "writerIdentity": "serviceAccount:o1234-5@gcp-sa-logging.iam.gserviceaccount.com",
        },
        {
            "name": "errors-to-pubsub",
            "destination": "pubsub.googleapis.com/projects/ops/topics/errors",
            "filter": "severity>=ERROR",
        },
    ]
