"""
Submission result exposed to the presentation layer.
"""

from dataclasses import dataclass
from typing import Optional

from ..enums import SubmissionStatus


@dataclass(frozen=True)
class SubmissionResult:
    """Tagged outcome: Submitting | Success{booking_id} | Failure{reason}."""

    status: SubmissionStatus
    booking_id: Optional[str] = None
    reason: Optional[str] = None
    warning: Optional[str] = None

    @classmethod
    def submitting(cls) -> "SubmissionResult":
        return cls(status=SubmissionStatus.SUBMITTING)

    @classmethod
    def success(cls, booking_id: str, warning: Optional[str] = None) -> "SubmissionResult":
        return cls(status=SubmissionStatus.SUCCESS, booking_id=booking_id, warning=warning)

    @classmethod
    def failure(cls, reason: str) -> "SubmissionResult":
        return cls(status=SubmissionStatus.FAILURE, reason=reason)

    @property
    def is_success(self) -> bool:
        return self.status == SubmissionStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status == SubmissionStatus.FAILURE
