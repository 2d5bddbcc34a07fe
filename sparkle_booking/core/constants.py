"""
Booking constants shared by models and validators.
"""

from typing import List

# Hourly slots offered by the booking form
TIME_SLOTS: List[str] = [
    "08:00", "09:00", "10:00", "11:00", "12:00",
    "13:00", "14:00", "15:00", "16:00", "17:00",
]
