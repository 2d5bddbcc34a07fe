"""
Booking-related data models.
"""

from dataclasses import dataclass, fields
from datetime import date as date_type
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.validation import ValidationUtils
from ..enums import BookingStatus, NotificationStatus
from .customer import Customer
from .service import Service


def _raise_if_invalid(result: Tuple[bool, Optional[str]]) -> None:
    ok, message = result
    if not ok:
        raise ValueError(message)


@dataclass
class BookingDraft:
    """In-progress booking input owned by the active form session."""

    service_id: Optional[str] = None
    date: str = ""
    time: str = ""
    address: str = ""
    name: str = ""
    phone: str = ""
    notes: str = ""
    email: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def clear(self) -> None:
        """Reset every field to its empty value."""
        for name, value in vars(BookingDraft()).items():
            setattr(self, name, value)

    def is_blank(self, name: str) -> bool:
        value = getattr(self, name)
        return value is None or not str(value).strip()

    def to_payload(self, service_id: Optional[str] = None) -> "BookingPayload":
        """Build the validated submission payload from the draft."""
        return BookingPayload(
            service_id=service_id or self.service_id or "",
            date=self.date,
            time=self.time,
            address=self.address,
            name=self.name,
            phone=self.phone,
            notes=self.notes or None,
            email=self.email or None,
        )


class BookingPayload(BaseModel):
    """Finalized booking input sent to the creation transaction.

    Unknown keys are dropped, so a client-supplied price never reaches the
    transaction.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    service_id: str = Field(min_length=1)
    date: str
    time: str
    address: str = Field(min_length=1)
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    notes: Optional[str] = None
    email: Optional[str] = None

    @field_validator("address", "name", "notes")
    @classmethod
    def _sanitize(cls, value: Optional[str]) -> Optional[str]:
        return ValidationUtils.sanitize_text(value) if value is not None else None

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        _raise_if_invalid(ValidationUtils.validate_date(value))
        return date_type.fromisoformat(value).isoformat()

    @field_validator("time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        _raise_if_invalid(ValidationUtils.validate_time_slot(value))
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        _raise_if_invalid(ValidationUtils.validate_name(value))
        return value

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        _raise_if_invalid(ValidationUtils.validate_phone(value))
        return value

    @field_validator("notes", "email")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        _raise_if_invalid(ValidationUtils.validate_email(value))
        return value


class Booking(BaseModel):
    """Persisted booking record."""

    model_config = ConfigDict(extra="forbid")

    id: str
    customer_id: str
    service_id: str
    booking_date: str
    booking_time: str
    total_amount: int
    notes: Optional[str] = None
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: str


class BookingDetails(BaseModel):
    """A booking joined with its service and customer."""

    booking: Booking
    service: Service
    customer: Customer


class BookingOutcome(BaseModel):
    """Result of a successful booking creation transaction."""

    booking: Booking
    customer: Customer
    notification: NotificationStatus = NotificationStatus.SENT
    warning: Optional[str] = None

    @property
    def delivery_warning(self) -> bool:
        return self.notification != NotificationStatus.SENT

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
