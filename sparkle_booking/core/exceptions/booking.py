"""
Booking-related exceptions.
"""

from typing import Any, Dict, Iterable, List, Optional


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class BookingValidationError(BookingFlowError):
    """Exception raised when booking fields are blank or malformed."""

    def __init__(self, missing: Iterable[str], step: Optional[str] = None, message: Optional[str] = None):
        self.missing = list(missing)
        self.step = step
        if message is None:
            where = f" for step '{step}'" if step else ""
            message = f"Missing required fields{where}: {', '.join(self.missing)}"
        super().__init__(message)

    @classmethod
    def from_errors(cls, errors: Iterable[Dict[str, Any]], step: Optional[str] = None) -> "BookingValidationError":
        """Build from pydantic-style error dicts (``loc``/``msg``), naming each invalid field once."""
        invalid: List[str] = []
        for err in errors:
            loc = err.get("loc") or ()
            if loc and str(loc[-1]) not in invalid:
                invalid.append(str(loc[-1]))
        return cls(invalid, step=step, message=f"Invalid booking fields: {', '.join(invalid)}")


class NoServiceSelectedError(BookingFlowError):
    """Exception raised when a booking is submitted with no service chosen."""

    def __init__(self, message: str = "Please select a service first"):
        super().__init__(message)
