import asyncio
import pytest
from unittest.mock import AsyncMock

from sparkle_booking.core.enums import BookingStatus, NotificationStatus
from sparkle_booking.core.exceptions import (
    BookingInsertError,
    BookingValidationError,
    CustomerUpsertError,
    NotificationError,
    ServiceLookupError,
)
from sparkle_booking.core.models import BookingPayload
from sparkle_booking.services.booking import NOTIFICATION_WARNING, BookingTransaction


def _payload(**overrides):
    data = {
        "service_id": "svc1",
        "date": "2025-03-10",
        "time": "10:00",
        "address": "A",
        "name": "B",
        "phone": "0100000000",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_scenario_books_at_catalog_price(transaction, repository, mock_dispatcher):
    outcome = await transaction.create_booking(_payload())

    booking = outcome.booking
    assert booking.total_amount == 150
    assert booking.status == BookingStatus.CONFIRMED
    assert booking.booking_date == "2025-03-10"
    assert booking.booking_time == "10:00"
    assert outcome.customer.phone == "0100000000"
    assert outcome.customer.email == "0100000000@placeholder.invalid"
    assert booking.customer_id == outcome.customer.id
    assert outcome.notification == NotificationStatus.SENT
    assert outcome.warning is None

    stored = await repository.get_booking(booking.id)
    assert stored == booking
    mock_dispatcher.send.assert_awaited_once_with(booking.id, outcome.customer.email, "B")


@pytest.mark.asyncio
async def test_client_supplied_price_is_ignored(transaction):
    outcome = await transaction.create_booking(_payload(total_amount=1, price=1))
    assert outcome.booking.total_amount == 150


@pytest.mark.asyncio
async def test_same_phone_reuses_customer(transaction, repository):
    first = await transaction.create_booking(_payload(name="Mona"))
    second = await transaction.create_booking(
        _payload(name="Mona A.", phone="010-000-0000", service_id="svc2", time="11:00")
    )

    assert await repository.count_customers() == 1
    assert await repository.count_bookings() == 2
    assert first.customer.id == second.customer.id
    assert second.customer.name == "Mona A."
    assert await repository.count_bookings(first.customer.id) == 2
    assert second.booking.total_amount == 250


@pytest.mark.asyncio
async def test_accepts_validated_payload_model(transaction):
    payload = BookingPayload(**_payload(email="mona@example.com", notes="  "))
    outcome = await transaction.create_booking(payload)

    assert outcome.customer.email == "mona@example.com"
    assert outcome.booking.notes is None


@pytest.mark.asyncio
async def test_dispatcher_failure_still_books(transaction, repository, mock_dispatcher):
    mock_dispatcher.send = AsyncMock(side_effect=NotificationError("Email API HTTP error 500"))

    outcome = await transaction.create_booking(_payload())

    assert outcome.notification == NotificationStatus.FAILED
    assert outcome.warning == NOTIFICATION_WARNING
    assert outcome.delivery_warning
    assert await repository.count_bookings() == 1


@pytest.mark.asyncio
async def test_dispatcher_rejection_is_a_warning(transaction, mock_dispatcher):
    mock_dispatcher.send = AsyncMock(return_value=False)

    outcome = await transaction.create_booking(_payload())

    assert outcome.notification == NotificationStatus.FAILED
    assert outcome.warning == NOTIFICATION_WARNING


@pytest.mark.asyncio
async def test_slow_dispatcher_reports_unknown(repository, catalog, mock_dispatcher):
    release = asyncio.Event()

    async def slow_send(*args):
        await release.wait()
        return True

    mock_dispatcher.send = AsyncMock(side_effect=slow_send)
    transaction = BookingTransaction(repository, catalog, mock_dispatcher, notification_timeout=0.05)

    outcome = await transaction.create_booking(_payload())

    assert outcome.notification == NotificationStatus.UNKNOWN
    assert outcome.warning == NOTIFICATION_WARNING
    assert await repository.count_bookings() == 1
    assert transaction.pending_notifications == 1

    release.set()
    await transaction.drain_notifications(timeout=1.0)
    assert transaction.pending_notifications == 0


@pytest.mark.asyncio
async def test_drain_cancels_stuck_notifications(repository, catalog, mock_dispatcher):
    async def never_returns(*args):
        await asyncio.Event().wait()

    mock_dispatcher.send = AsyncMock(side_effect=never_returns)
    transaction = BookingTransaction(repository, catalog, mock_dispatcher, notification_timeout=0.01)
    await transaction.create_booking(_payload())

    await transaction.drain_notifications(timeout=0.01)
    await asyncio.sleep(0)
    assert transaction.pending_notifications == 0


@pytest.mark.asyncio
async def test_unknown_service_leaves_no_booking(transaction, repository, mock_dispatcher):
    with pytest.raises(ServiceLookupError) as exc_info:
        await transaction.create_booking(_payload(service_id="svc-missing"))

    assert exc_info.value.reason == "Failed to fetch service details"
    assert await repository.count_bookings() == 0
    mock_dispatcher.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_service_lookup_exception_is_classified(transaction, repository, catalog):
    catalog.get_service = AsyncMock(side_effect=RuntimeError("db gone"))

    with pytest.raises(ServiceLookupError) as exc_info:
        await transaction.create_booking(_payload())

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert await repository.count_bookings() == 0


@pytest.mark.asyncio
async def test_customer_upsert_failure(transaction, repository, mock_dispatcher):
    repository.upsert_customer = AsyncMock(side_effect=RuntimeError("disk I/O error"))

    with pytest.raises(CustomerUpsertError) as exc_info:
        await transaction.create_booking(_payload())

    assert exc_info.value.reason == "Failed to create customer profile"
    assert await repository.count_bookings() == 0
    mock_dispatcher.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_malformed_contact_rejected_before_any_write(transaction, repository, mock_dispatcher):
    with pytest.raises(BookingValidationError) as exc_info:
        await transaction.create_booking(_payload(phone="12", email="not-an-email"))

    assert exc_info.value.missing == ["phone", "email"]
    assert await repository.count_customers() == 0
    assert await repository.count_bookings() == 0
    mock_dispatcher.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_booking_insert_failure(transaction, repository, mock_dispatcher):
    repository.insert_booking = AsyncMock(side_effect=RuntimeError("constraint failed"))

    with pytest.raises(BookingInsertError) as exc_info:
        await transaction.create_booking(_payload())

    assert exc_info.value.reason == "Failed to create booking"
    assert await repository.count_bookings() == 0
    mock_dispatcher.send.assert_not_awaited()
