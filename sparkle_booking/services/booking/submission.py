"""
Booking submission orchestrator.
"""

from typing import Optional
from pydantic import ValidationError

from ...core.exceptions import (
    BookingFlowError,
    BookingTransactionError,
    BookingValidationError,
    NoServiceSelectedError,
)
from ...core.models import BookingDraft, BookingPayload, Service, SubmissionResult
from ...utils.logging import get_logger
from .gateway import BookingGateway
from .step_controller import StepController

logger = get_logger("sparkle.booking.submission")


class BookingSubmissionOrchestrator:
    """Drives one submission at a time from a session to the booking gateway.

    The in-flight flag is checked and set without an intervening await, so
    rapid repeated submits from the same session reach the gateway once.
    """

    def __init__(self, gateway: BookingGateway, controller: Optional[StepController] = None):
        self.gateway = gateway
        self.controller = controller
        self.last_result: Optional[SubmissionResult] = None
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def submit_booking(self, service: Optional[Service], draft: BookingDraft) -> SubmissionResult:
        """Submit the draft for ``service``.

        Returns ``Submitting`` when another submission is still running,
        otherwise ``Success`` or ``Failure``. When a step controller is bound,
        its draft and review-step guard are used.
        """
        if self._in_flight:
            logger.info("Submission already in flight; ignoring duplicate submit")
            return SubmissionResult.submitting()

        self._in_flight = True
        try:
            result = await self._submit(service, draft)
        finally:
            self._in_flight = False

        self.last_result = result
        return result

    async def _submit(self, service: Optional[Service], draft: BookingDraft) -> SubmissionResult:
        try:
            payload = self._build_payload(service, draft)
        except BookingFlowError as e:
            logger.info("Submission blocked: %s", e)
            return SubmissionResult.failure(str(e))

        try:
            outcome = await self.gateway.create_booking(payload)
        except BookingTransactionError as e:
            logger.error("Booking creation failed: %s", e.reason)
            return SubmissionResult.failure(e.reason)
        except BookingFlowError as e:
            logger.info("Booking rejected: %s", e)
            return SubmissionResult.failure(str(e))
        except Exception:
            logger.exception("Booking creation failed unexpectedly")
            return SubmissionResult.failure(BookingTransactionError.user_message)

        if self.controller is not None:
            self.controller.complete()
        else:
            draft.clear()

        if outcome.warning:
            logger.warning("Booking %s created with warning: %s", outcome.booking.id, outcome.warning)
        return SubmissionResult.success(outcome.booking.id, warning=outcome.warning)

    def _build_payload(self, service: Optional[Service], draft: BookingDraft) -> BookingPayload:
        if service is None:
            raise NoServiceSelectedError()
        if self.controller is not None:
            return self.controller.ensure_submittable(service)
        try:
            return draft.to_payload(service.id)
        except ValidationError as e:
            raise BookingValidationError.from_errors(e.errors()) from e
