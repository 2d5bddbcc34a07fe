"""
Pytest configuration and fixtures.
"""

import pytest
import pytest_asyncio
from unittest.mock import Mock, AsyncMock

from sparkle_booking.core.enums import NotificationStatus
from sparkle_booking.core.models import (
    Booking,
    BookingDraft,
    BookingOutcome,
    Customer,
    Service,
)
from sparkle_booking.services.booking import BookingGateway, BookingTransaction
from sparkle_booking.services.catalog import CatalogService
from sparkle_booking.services.notification import NotificationDispatcher
from sparkle_booking.services.storage import BookingRepository


SVC1 = Service(id="svc1", name="Exterior Wash", description="Body and wheels", price=150, duration_minutes=60)
SVC2 = Service(id="svc2", name="Full Wash", description="Inside and out", price=250, duration_minutes=90)


@pytest.fixture
def sample_service():
    return SVC1


@pytest_asyncio.fixture
async def repository(tmp_path):
    """Repository on a fresh SQLite file with two services."""
    repo = BookingRepository(str(tmp_path / "sparkle.db"))
    await repo.init_schema()
    await repo.seed_services([SVC2, SVC1])
    return repo


@pytest.fixture
def catalog(repository):
    return CatalogService(repository)


@pytest.fixture
def mock_dispatcher():
    """Dispatcher that accepts every confirmation."""
    dispatcher = Mock(spec=NotificationDispatcher)
    dispatcher.send = AsyncMock(return_value=True)
    return dispatcher


@pytest.fixture
def transaction(repository, catalog, mock_dispatcher):
    return BookingTransaction(repository, catalog, mock_dispatcher, notification_timeout=1.0)


@pytest.fixture
def sample_draft():
    """Draft with every required field filled in."""
    return BookingDraft(
        service_id="svc1",
        date="2025-03-10",
        time="10:00",
        address="12 Nile St, Cairo",
        name="Mona",
        phone="0100000000",
        notes="Gate code 42",
    )


@pytest.fixture
def empty_draft():
    return BookingDraft()


@pytest.fixture
def sample_outcome():
    customer = Customer(
        id="cust-1",
        name="Mona",
        phone="0100000000",
        email="0100000000@placeholder.invalid",
        address="12 Nile St, Cairo",
        created_at="2025-03-01T10:00:00+00:00",
        updated_at="2025-03-01T10:00:00+00:00",
    )
    booking = Booking(
        id="bk-1",
        customer_id="cust-1",
        service_id="svc1",
        booking_date="2025-03-10",
        booking_time="10:00",
        total_amount=150,
        created_at="2025-03-01T10:00:00+00:00",
    )
    return BookingOutcome(booking=booking, customer=customer, notification=NotificationStatus.SENT)


@pytest.fixture
def mock_gateway(sample_outcome):
    gateway = Mock(spec=BookingGateway)
    gateway.create_booking = AsyncMock(return_value=sample_outcome)
    return gateway
