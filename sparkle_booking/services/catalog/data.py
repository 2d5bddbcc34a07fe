"""
Default service catalog used to seed an empty database.
"""

from typing import List

from ...core.models import Service

# prices in EGP, durations in minutes
DEFAULT_SERVICES: List[Service] = [
    Service(
        id="svc-exterior-wash",
        name="Exterior Wash",
        description="Hand wash, rinse and dry of the car body and wheels.",
        price=150,
        duration_minutes=60,
    ),
    Service(
        id="svc-full-wash",
        name="Full Wash",
        description="Exterior wash plus interior vacuum and dashboard wipe.",
        price=250,
        duration_minutes=90,
    ),
    Service(
        id="svc-interior-detail",
        name="Interior Detailing",
        description="Deep cleaning of seats, carpets and trims.",
        price=400,
        duration_minutes=120,
    ),
    Service(
        id="svc-premium-detail",
        name="Premium Detailing",
        description="Full wash, interior detailing, wax and tyre shine.",
        price=650,
        duration_minutes=180,
    ),
]
