"""
Confirmation email content.
"""

from datetime import datetime
from html import escape
from typing import Tuple

from ...core.models import BookingDetails


def format_booking_datetime(booking_date: str, booking_time: str) -> Tuple[str, str]:
    """Return ("Monday, March 10, 2025", "10:00 AM") for an ISO date and HH:MM slot."""
    moment = datetime.fromisoformat(f"{booking_date}T{booking_time}")
    return moment.strftime("%A, %B %d, %Y"), moment.strftime("%I:%M %p")


def render_confirmation(
    details: BookingDetails,
    recipient_name: str,
    currency: str = "EGP",
    support_email: str = "support@sparklego.com",
) -> Tuple[str, str]:
    """Build the subject and HTML body of a booking confirmation."""
    booking, service, customer = details.booking, details.service, details.customer
    support = escape(support_email)
    formatted_date, formatted_time = format_booking_datetime(booking.booking_date, booking.booking_time)

    subject = f"Booking Confirmation - {service.name}"
    notes = ""
    if booking.notes:
        notes = (
            "<h4>Special Instructions:</h4>"
            f"<p>{escape(booking.notes)}</p>"
        )

    html = (
        "<div style=\"font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;\">"
        "<h1>SparkleGo</h1>"
        "<p>Your car wash booking is confirmed!</p>"
        f"<h2>Hi {escape(recipient_name)}!</h2>"
        "<h3>Booking Details</h3>"
        "<table>"
        f"<tr><td>Service:</td><td>{escape(service.name)}</td></tr>"
        f"<tr><td>Date:</td><td>{formatted_date}</td></tr>"
        f"<tr><td>Time:</td><td>{formatted_time}</td></tr>"
        f"<tr><td>Address:</td><td>{escape(customer.address or 'Address not provided')}</td></tr>"
        f"<tr><td>Total Amount:</td><td>{booking.total_amount} {escape(currency)}</td></tr>"
        "</table>"
        f"{notes}"
        "<p>Payment will be collected after service completion.</p>"
        f"<p>Need to modify or cancel your booking? Contact us at "
        f"<a href=\"mailto:{support}\">{support}</a></p>"
        "</div>"
    )
    return subject, html
