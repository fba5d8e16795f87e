"""Severity levels for progress and diagnostic lines.

The pipeline tags every line it reports with one of these; the rendering
target decides how each level looks.
"""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity of a reported line."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
