"""
Step controller for the multi-step booking form.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import ValidationError

from ...core.enums import BookingStep
from ...core.exceptions import BookingFlowError, BookingValidationError, NoServiceSelectedError
from ...core.models import BookingDraft, BookingPayload, Service
from ...utils.logging import get_logger
from ...utils.validation import ValidationUtils

logger = get_logger("sparkle.booking.steps")


class StepController:
    """Manage step transitions and field mutations on a BookingDraft."""

    _STEP_ORDER: List[BookingStep] = [
        BookingStep.DATE_TIME,
        BookingStep.LOCATION,
        BookingStep.CONTACT,
        BookingStep.REVIEW,
    ]

    _STEP_REQUIREMENTS: Dict[BookingStep, List[str]] = {
        BookingStep.DATE_TIME: ["date", "time"],
        BookingStep.LOCATION: ["address"],
        BookingStep.CONTACT: ["name", "phone"],
        BookingStep.REVIEW: [],
    }

    def __init__(self, draft: Optional[BookingDraft] = None) -> None:
        self.draft = draft if draft is not None else BookingDraft()
        self._step = BookingStep.DATE_TIME

    @property
    def step(self) -> BookingStep:
        return self._step

    @property
    def is_complete(self) -> bool:
        return self._step == BookingStep.SUCCESS

    @property
    def is_final_step(self) -> bool:
        return self._step == self._STEP_ORDER[-1]

    def required_fields(self, step: Optional[BookingStep] = None) -> List[str]:
        return list(self._STEP_REQUIREMENTS.get(step or self._step, []))

    def missing_fields(self, step: Optional[BookingStep] = None) -> List[str]:
        """Required fields of ``step`` (default: the current step) that are still blank."""
        return ValidationUtils.blank_fields(self.draft, self.required_fields(step))

    def all_missing_fields(self) -> List[str]:
        missing: List[str] = []
        for step in self._STEP_ORDER:
            missing.extend(self.missing_fields(step))
        return missing

    def set_field(self, key: str, value: Any) -> None:
        """Store a value on the draft; validation happens on advance/submit."""
        if key not in BookingDraft.field_names():
            raise ValueError(f"Unknown booking field '{key}'")
        setattr(self.draft, key, value)

    def advance(self) -> bool:
        """
        Move to the next step.

        Returns:
            True if the step changed, False at the review step or after success.

        Raises:
            BookingValidationError: current step has blank required fields;
                the step is left unchanged.
        """
        if self.is_complete or self.is_final_step:
            return False
        missing = self.missing_fields()
        if missing:
            raise BookingValidationError(missing, step=self._step.value)
        self._move_to(self._STEP_ORDER[self._STEP_ORDER.index(self._step) + 1])
        return True

    def retreat(self) -> bool:
        """Move to the previous step. No-op at the first step and after success."""
        if self.is_complete or self._step == self._STEP_ORDER[0]:
            return False
        self._move_to(self._STEP_ORDER[self._STEP_ORDER.index(self._step) - 1])
        return True

    def ensure_submittable(self, service: Optional[Service]) -> BookingPayload:
        """Check that the draft can be submitted and build its payload.

        Leaves the controller untouched whether it succeeds or raises.
        """
        if not self.is_final_step:
            raise BookingFlowError("Booking can only be submitted from the review step")
        if service is None:
            raise NoServiceSelectedError()

        missing = self.all_missing_fields()
        if missing:
            raise BookingValidationError(missing, step=self._step.value)

        try:
            return self.draft.to_payload(service.id)
        except ValidationError as e:
            raise BookingValidationError.from_errors(e.errors(), step=self._step.value) from e

    def complete(self) -> None:
        """Discard the submitted draft and enter the terminal success state."""
        self.draft.clear()
        self._move_to(BookingStep.SUCCESS)

    def reopen(self) -> None:
        """Start over with an empty draft at the first step."""
        self.draft.clear()
        self._move_to(BookingStep.DATE_TIME)

    def _move_to(self, step: BookingStep) -> None:
        prev_step = self._step
        self._step = step
        if prev_step != step:
            self._log_step_transition(prev_step, step)

    def _log_step_transition(self, from_step: BookingStep, to_step: BookingStep) -> None:
        logger.debug("booking step %s -> %s", from_step.value, to_step.value)
