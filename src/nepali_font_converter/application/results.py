"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from nepali_font_converter.types import FailureReason, Offset, OutcomeStatus


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of converting one run."""

    status: OutcomeStatus
    result_text: str | None = None
    failure_reason: FailureReason | None = None
    message_id: str | None = None

    @classmethod
    def success(cls, result_text: str) -> ConversionOutcome:
        return cls(status=OutcomeStatus.SUCCESS, result_text=result_text)

    @classmethod
    def fail(
        cls,
        reason: FailureReason,
        message_id: str | None = None,
    ) -> ConversionOutcome:
        return cls(
            status=OutcomeStatus.FAIL,
            failure_reason=reason,
            message_id=message_id,
        )

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @property
    def is_reportable_failure(self) -> bool:
        """Failed for a reason the user should be told about."""
        return (
            self.status is OutcomeStatus.FAIL
            and self.failure_reason is not None
            and self.failure_reason.is_reportable
        )


@dataclass(frozen=True)
class WriteBack:
    """Replacement applied to the host, in offsets current at apply time."""

    start: Offset
    end: Offset
    text: str
    font_name: str

    @property
    def delta(self) -> int:
        """Length change introduced by this replacement."""
        return len(self.text) - (self.end - self.start)


@dataclass(frozen=True)
class RemoteNotice:
    """Single user-facing message for a failed session."""

    reason: FailureReason
    address: str
    message: str


@dataclass(frozen=True)
class ConversionSessionResult:
    """Aggregate over every run of one conversion request."""

    outcomes: tuple[ConversionOutcome, ...] = ()
    edits: tuple[WriteBack, ...] = ()
    failure: ConversionOutcome | None = None
    notice: RemoteNotice | None = None

    @property
    def has_failure(self) -> bool:
        return self.failure is not None

    @property
    def converted_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.is_success)

    @property
    def skipped_count(self) -> int:
        return sum(
            1
            for outcome in self.outcomes
            if outcome.failure_reason is FailureReason.UNSUPPORTED_SOURCE
        )
