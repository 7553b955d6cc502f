"""Shared type aliases and enums for conversion modules."""

from __future__ import annotations

from enum import Enum

type CanonicalKey = str
type Offset = int


class OutcomeStatus(str, Enum):
    """Per-run conversion status."""

    SUCCESS = "success"
    FAIL = "fail"


class FailureReason(str, Enum):
    """Failure taxonomy for a single run."""

    TRANSIENT_ERROR = "transient_error"
    LICENSE_EXPIRED = "license_expired"
    TRIAL_EXPIRED = "trial_expired"
    UNSUPPORTED_SOURCE = "unsupported_source"

    @property
    def is_reportable(self) -> bool:
        """Unsupported runs are skipped silently, everything else is surfaced."""
        return self is not FailureReason.UNSUPPORTED_SOURCE
