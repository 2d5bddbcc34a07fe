"""
Booking submission handler.
"""

from typing import Any, Dict
from fastapi import APIRouter, HTTPException, status

from ...core.models import BookingDetails, BookingPayload
from ...services.booking import BookingTransaction
from ...services.storage import BookingRepository


class BookingsHandler:
    """Handler that runs the booking creation transaction."""

    def __init__(self, transaction: BookingTransaction, repository: BookingRepository):
        self.transaction = transaction
        self.repository = repository
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.post("", status_code=status.HTTP_201_CREATED)
        async def create_booking(payload: BookingPayload) -> Dict[str, Any]:
            """Create a booking; classified failures are rendered by the app's error handlers."""
            outcome = await self.transaction.create_booking(payload)
            return outcome.to_response()

        @self.router.get("/{booking_id}", response_model=BookingDetails)
        async def get_booking(booking_id: str):
            details = await self.repository.get_booking_details(booking_id)
            if details is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
            return details
