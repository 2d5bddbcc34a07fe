"""
Booking summary shown on the review step.
"""

from dataclasses import dataclass
from typing import List, Optional

from ...core.models import BookingDraft, Service
from ...utils.phone import PhoneNumberParser


@dataclass(frozen=True)
class BookingSummary:
    service_name: str
    duration_minutes: int
    date: str
    time: str
    address: str
    name: str
    phone: str
    notes: Optional[str]
    total: int
    currency: str

    @property
    def total_display(self) -> str:
        return f"{self.total} {self.currency}"

    def lines(self) -> List[str]:
        rows = [
            f"Service: {self.service_name} ({self.duration_minutes} min)",
            f"Date: {self.date}",
            f"Time: {self.time}",
            f"Location: {self.address}",
            f"Name: {self.name}",
            f"Phone: {self.phone}",
        ]
        if self.notes:
            rows.append(f"Notes: {self.notes}")
        rows.append(f"Total: {self.total_display}")
        return rows


def build_summary(service: Service, draft: BookingDraft, currency: str = "EGP") -> BookingSummary:
    """Derive the summary from the selected service and the current draft.

    The displayed total is the catalog price; the server resolves the price
    again when the booking is created.
    """
    return BookingSummary(
        service_name=service.name,
        duration_minutes=service.duration_minutes,
        date=draft.date,
        time=draft.time,
        address=draft.address,
        name=draft.name,
        phone=PhoneNumberParser.format_for_display(draft.phone),
        notes=draft.notes or None,
        total=service.price,
        currency=currency,
    )
