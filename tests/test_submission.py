import asyncio
import pytest
from unittest.mock import AsyncMock

from sparkle_booking.core.enums import BookingStep, SubmissionStatus
from sparkle_booking.core.exceptions import BookingInsertError, BookingValidationError, ServiceLookupError
from sparkle_booking.core.models import BookingDraft
from sparkle_booking.services.booking import (
    NOTIFICATION_WARNING,
    BookingSubmissionOrchestrator,
    StepController,
)


@pytest.mark.asyncio
async def test_success_clears_draft(mock_gateway, sample_service, sample_draft):
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    result = await orchestrator.submit_booking(sample_service, sample_draft)

    assert result.status == SubmissionStatus.SUCCESS
    assert result.booking_id == "bk-1"
    assert result.warning is None
    assert sample_draft.is_blank("name")
    assert orchestrator.last_result == result
    assert not orchestrator.in_flight


@pytest.mark.asyncio
async def test_payload_sent_to_gateway(mock_gateway, sample_service, sample_draft):
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)
    await orchestrator.submit_booking(sample_service, sample_draft)

    payload = mock_gateway.create_booking.await_args.args[0]
    assert payload.service_id == "svc1"
    assert payload.phone == "0100000000"
    assert payload.address == "12 Nile St, Cairo"


@pytest.mark.asyncio
async def test_no_service_fails_without_calling_gateway(mock_gateway, sample_draft):
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    result = await orchestrator.submit_booking(None, sample_draft)

    assert result.status == SubmissionStatus.FAILURE
    assert result.reason == "Please select a service first"
    mock_gateway.create_booking.assert_not_awaited()
    assert sample_draft.name == "Mona"


@pytest.mark.asyncio
async def test_transaction_failure_keeps_draft(mock_gateway, sample_service, sample_draft):
    mock_gateway.create_booking = AsyncMock(side_effect=ServiceLookupError())
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    result = await orchestrator.submit_booking(sample_service, sample_draft)

    assert result.is_failure
    assert result.reason == "Failed to fetch service details"
    assert sample_draft.name == "Mona"
    assert sample_draft.date == "2025-03-10"
    assert not orchestrator.in_flight


@pytest.mark.asyncio
async def test_unexpected_gateway_error_is_reported_as_failure(mock_gateway, sample_service, sample_draft):
    mock_gateway.create_booking = AsyncMock(side_effect=RuntimeError("socket closed"))
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    result = await orchestrator.submit_booking(sample_service, sample_draft)

    assert result.is_failure
    assert result.reason == "Failed to create booking. Please try again."
    assert sample_draft.name == "Mona"


@pytest.mark.asyncio
async def test_retry_after_failure(mock_gateway, sample_service, sample_draft, sample_outcome):
    mock_gateway.create_booking = AsyncMock(side_effect=[BookingInsertError(), sample_outcome])
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    first = await orchestrator.submit_booking(sample_service, sample_draft)
    second = await orchestrator.submit_booking(sample_service, sample_draft)

    assert first.reason == "Failed to create booking"
    assert second.is_success
    assert mock_gateway.create_booking.await_count == 2


@pytest.mark.asyncio
async def test_double_submit_reaches_gateway_once(mock_gateway, sample_service, sample_draft, sample_outcome):
    release = asyncio.Event()

    async def slow_create(payload):
        await release.wait()
        return sample_outcome

    mock_gateway.create_booking = AsyncMock(side_effect=slow_create)
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    first = asyncio.create_task(orchestrator.submit_booking(sample_service, sample_draft))
    await asyncio.sleep(0)
    assert orchestrator.in_flight

    second = await orchestrator.submit_booking(sample_service, sample_draft)
    assert second.status == SubmissionStatus.SUBMITTING

    release.set()
    result = await first

    assert result.is_success
    assert mock_gateway.create_booking.await_count == 1
    assert not orchestrator.in_flight


@pytest.mark.asyncio
async def test_warning_is_passed_through(mock_gateway, sample_service, sample_draft, sample_outcome):
    warned = sample_outcome.model_copy(update={"warning": NOTIFICATION_WARNING})
    mock_gateway.create_booking = AsyncMock(return_value=warned)
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    result = await orchestrator.submit_booking(sample_service, sample_draft)

    assert result.is_success
    assert result.warning == NOTIFICATION_WARNING


@pytest.mark.asyncio
async def test_with_controller_requires_review_step(mock_gateway, sample_service, sample_draft):
    controller = StepController(sample_draft)
    orchestrator = BookingSubmissionOrchestrator(mock_gateway, controller)

    result = await orchestrator.submit_booking(sample_service, controller.draft)

    assert result.is_failure
    mock_gateway.create_booking.assert_not_awaited()
    assert controller.step == BookingStep.DATE_TIME


@pytest.mark.asyncio
async def test_with_controller_success_moves_to_success_step(mock_gateway, sample_service, sample_draft):
    controller = StepController(sample_draft)
    for _ in range(3):
        controller.advance()
    orchestrator = BookingSubmissionOrchestrator(mock_gateway, controller)

    result = await orchestrator.submit_booking(sample_service, controller.draft)

    assert result.is_success
    assert controller.step == BookingStep.SUCCESS
    assert controller.draft.is_blank("phone")


@pytest.mark.asyncio
async def test_invalid_draft_without_controller(mock_gateway, sample_service):
    draft = BookingDraft(date="10/03/2025", time="10:00", address="Maadi", name="Mona", phone="0100000000")
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    result = await orchestrator.submit_booking(sample_service, draft)

    assert result.is_failure
    assert "date" in result.reason
    mock_gateway.create_booking.assert_not_awaited()


@pytest.mark.asyncio
async def test_server_side_validation_error_keeps_draft(mock_gateway, sample_service, sample_draft):
    mock_gateway.create_booking = AsyncMock(side_effect=BookingValidationError.from_errors([{"loc": ["body", "phone"]}]))
    orchestrator = BookingSubmissionOrchestrator(mock_gateway)

    result = await orchestrator.submit_booking(sample_service, sample_draft)

    assert result.is_failure
    assert result.reason == "Invalid booking fields: phone"
    assert sample_draft.phone == "0100000000"
