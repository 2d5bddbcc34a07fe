"""
Phone number parsing and validation utilities.
"""

import re
from typing import Optional


PLACEHOLDER_EMAIL_DOMAIN = "placeholder.invalid"


class PhoneNumberParser:
    """Phone number utilities for Egyptian customer numbers."""

    # Local mobile format: 01XXXXXXXXX
    EGYPTIAN_MOBILE_PATTERN = r"^01[0125]\d{8}$"

    @classmethod
    def normalize(cls, phone: str) -> Optional[str]:
        """
        Normalize a phone number into the digits-only local form used as the
        customer key.

        Separators are dropped and the +20 / 0020 country prefix is rewritten
        to a leading zero. Numbers that do not look like a mobile number are
        still accepted as long as they have 7-15 digits.

        Args:
            phone: Phone number as typed by the customer

        Returns:
            Normalized number or None if no usable digits remain
        """
        if not phone or not isinstance(phone, str):
            return None

        digits = re.sub(r"\D", "", phone)

        if digits.startswith("0020") and len(digits) == 14:
            digits = "0" + digits[4:]
        elif digits.startswith("20") and len(digits) == 12:
            digits = "0" + digits[2:]

        if not 7 <= len(digits) <= 15:
            return None
        return digits

    @classmethod
    def is_valid(cls, phone: str) -> bool:
        """Check if the phone number can be used as a customer key."""
        return cls.normalize(phone) is not None

    @classmethod
    def is_egyptian_mobile(cls, phone: str) -> bool:
        normalized = cls.normalize(phone)
        return bool(normalized and re.match(cls.EGYPTIAN_MOBILE_PATTERN, normalized))

    @classmethod
    def placeholder_email(cls, phone: str) -> str:
        """Synthesize a unique, undeliverable contact address for a phone number."""
        key = cls.normalize(phone) or re.sub(r"\W", "", phone or "") or "unknown"
        return f"{key}@{PLACEHOLDER_EMAIL_DOMAIN}"

    @staticmethod
    def is_placeholder_email(email: Optional[str]) -> bool:
        return bool(email) and email.lower().endswith("@" + PLACEHOLDER_EMAIL_DOMAIN)

    @classmethod
    def format_for_display(cls, phone: str) -> str:
        """Format as 01X XXXX XXXX when the number is an Egyptian mobile."""
        normalized = cls.normalize(phone)
        if not normalized:
            return phone
        if cls.is_egyptian_mobile(normalized):
            return f"{normalized[:3]} {normalized[3:7]} {normalized[7:]}"
        return normalized
