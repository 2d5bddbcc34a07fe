"""
Per-session booking flow.
"""

from typing import Any, Optional

from ...core.enums import BookingStep
from ...core.models import BookingDraft, Service, SubmissionResult
from .gateway import BookingGateway
from .step_controller import StepController
from .submission import BookingSubmissionOrchestrator
from .summary import BookingSummary, build_summary


class BookingFlow:
    """Binds the selected service, the step controller and the orchestrator for one session.

    Until a service is selected the flow stays in a guard state: every
    transition is disabled and ``needs_service`` is True.
    """

    def __init__(self, gateway: BookingGateway, service: Optional[Service] = None, currency: str = "EGP"):
        self.controller = StepController()
        self.orchestrator = BookingSubmissionOrchestrator(gateway, self.controller)
        self.currency = currency
        self.service: Optional[Service] = None
        if service is not None:
            self.select_service(service)

    @property
    def draft(self) -> BookingDraft:
        return self.controller.draft

    @property
    def step(self) -> BookingStep:
        return self.controller.step

    @property
    def needs_service(self) -> bool:
        return self.service is None

    @property
    def in_flight(self) -> bool:
        return self.orchestrator.in_flight

    @property
    def last_result(self) -> Optional[SubmissionResult]:
        return self.orchestrator.last_result

    def select_service(self, service: Optional[Service]) -> None:
        self.service = service
        self.draft.service_id = service.id if service else None

    def set_field(self, key: str, value: Any) -> None:
        self.controller.set_field(key, value)

    def advance(self) -> bool:
        if self.needs_service:
            return False
        return self.controller.advance()

    def retreat(self) -> bool:
        if self.needs_service:
            return False
        return self.controller.retreat()

    async def submit(self) -> SubmissionResult:
        return await self.orchestrator.submit_booking(self.service, self.draft)

    def summary(self) -> Optional[BookingSummary]:
        """Recomputed on every call from the current service and draft."""
        if self.service is None:
            return None
        return build_summary(self.service, self.draft, self.currency)

    def reopen(self) -> None:
        self.controller.reopen()
        self.draft.service_id = self.service.id if self.service else None
