"""
Booking creation transaction.

Stages run strictly in order because each one needs the identifiers produced
by the previous one:

1. customer upsert (keyed by phone)
2. price resolution from the catalog
3. booking insert with the resolved price -- the durability point
4. confirmation dispatch, best effort

A failure in stages 1-3 aborts with a classified error and no booking row.
A customer row written by stage 1 may remain after a later abort; the upsert
makes that harmless on retry. Stage 4 never fails the transaction.
"""

import asyncio
from typing import Any, Dict, Optional, Set, Union
from pydantic import ValidationError

from ...core.enums import BookingStatus, NotificationStatus
from ...core.exceptions import (
    BookingInsertError,
    BookingValidationError,
    CustomerUpsertError,
    ServiceLookupError,
)
from ...core.models import Booking, BookingOutcome, BookingPayload, Customer, CustomerUpsert, Service
from ...utils.logging import get_logger
from ...utils.phone import PhoneNumberParser
from ..catalog import CatalogService
from ..notification import NotificationDispatcher
from ..storage import BookingRepository
from .gateway import BookingGateway

logger = get_logger("sparkle.booking.transaction")

NOTIFICATION_WARNING = (
    "Booking confirmed, but the confirmation email could not be sent. Delivery may be delayed."
)


class BookingTransaction(BookingGateway):
    """Turns a validated payload into a booking plus a confirmation attempt."""

    def __init__(
        self,
        repository: BookingRepository,
        catalog: CatalogService,
        dispatcher: NotificationDispatcher,
        notification_timeout: Optional[float] = 5.0,
    ):
        self.repository = repository
        self.catalog = catalog
        self.dispatcher = dispatcher
        self.notification_timeout = notification_timeout
        self._pending: Set[asyncio.Task] = set()

    async def create_booking(self, payload: Union[BookingPayload, Dict[str, Any]]) -> BookingOutcome:
        """Run all stages and return the booking, the customer and the delivery outcome."""
        if not isinstance(payload, BookingPayload):
            try:
                payload = BookingPayload.model_validate(payload)
            except ValidationError as e:
                raise BookingValidationError.from_errors(e.errors()) from e

        customer = await self._upsert_customer(payload)
        service = await self._resolve_service(payload.service_id)
        booking = await self._insert_booking(payload, customer, service)

        notification = await self._notify(booking, customer)
        warning = None if notification == NotificationStatus.SENT else NOTIFICATION_WARNING
        return BookingOutcome(booking=booking, customer=customer, notification=notification, warning=warning)

    async def _upsert_customer(self, payload: BookingPayload) -> Customer:
        phone = PhoneNumberParser.normalize(payload.phone)
        if phone is None:
            logger.error("Customer creation error: unusable phone number %r", payload.phone)
            raise CustomerUpsertError()

        data = CustomerUpsert(
            name=payload.name,
            phone=phone,
            email=payload.email or PhoneNumberParser.placeholder_email(phone),
            address=payload.address,
        )
        try:
            return await self.repository.upsert_customer(data)
        except Exception as e:
            logger.error("Customer creation error: %s", e, exc_info=True)
            raise CustomerUpsertError() from e

    async def _resolve_service(self, service_id: str) -> Service:
        try:
            service = await self.catalog.get_service(service_id)
        except Exception as e:
            logger.error("Service fetch error: %s", e, exc_info=True)
            raise ServiceLookupError() from e
        if service is None:
            logger.error("Service fetch error: service %s not found", service_id)
            raise ServiceLookupError()
        return service

    async def _insert_booking(self, payload: BookingPayload, customer: Customer, service: Service) -> Booking:
        try:
            booking = await self.repository.insert_booking(
                customer_id=customer.id,
                service_id=service.id,
                booking_date=payload.date,
                booking_time=payload.time,
                total_amount=service.price,
                notes=payload.notes,
                status=BookingStatus.CONFIRMED,
            )
        except Exception as e:
            logger.error("Booking creation error: %s", e, exc_info=True)
            raise BookingInsertError() from e
        logger.info(
            "Booking %s created for customer %s (%s %s, %s)",
            booking.id,
            customer.id,
            booking.booking_date,
            booking.booking_time,
            booking.total_amount,
        )
        return booking

    async def _notify(self, booking: Booking, customer: Customer) -> NotificationStatus:
        """Start the confirmation and wait for it at most ``notification_timeout`` seconds."""
        task = asyncio.create_task(self._send_confirmation(booking.id, customer.email, customer.name))
        done, _ = await asyncio.wait({task}, timeout=self.notification_timeout)
        if task in done:
            return task.result()

        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        logger.warning(
            "Confirmation for booking %s still pending after %ss; continuing",
            booking.id,
            self.notification_timeout,
        )
        return NotificationStatus.UNKNOWN

    async def _send_confirmation(self, booking_id: str, email: str, name: str) -> NotificationStatus:
        try:
            sent = await self.dispatcher.send(booking_id, email, name)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning("Email sending error for booking %s: %s", booking_id, e)
            return NotificationStatus.FAILED
        if not sent:
            logger.warning("Confirmation for booking %s was not delivered", booking_id)
            return NotificationStatus.FAILED
        return NotificationStatus.SENT

    @property
    def pending_notifications(self) -> int:
        return len(self._pending)

    async def drain_notifications(self, timeout: Optional[float] = None) -> None:
        """Wait for detached confirmations; cancel whatever is still running after ``timeout``."""
        if not self._pending:
            return
        _, still_running = await asyncio.wait(set(self._pending), timeout=timeout)
        for task in still_running:
            task.cancel()
        if still_running:
            await asyncio.gather(*still_running, return_exceptions=True)
