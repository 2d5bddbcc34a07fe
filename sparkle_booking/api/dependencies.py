"""
Wiring of the service layer for the API.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import DatabaseConfig, NotificationConfig, Settings
from ..services.booking import BookingTransaction
from ..services.catalog import CatalogService
from ..services.notification import (
    EmailNotificationDispatcher,
    LoggingNotificationDispatcher,
    NotificationDispatcher,
)
from ..services.storage import BookingRepository
from ..utils.logging import get_logger

logger = get_logger("sparkle.api")


@dataclass
class ServiceContainer:
    settings: Settings
    repository: BookingRepository
    catalog: CatalogService
    dispatcher: NotificationDispatcher
    transaction: BookingTransaction

    async def startup(self) -> None:
        await self.repository.init_schema()
        if DatabaseConfig.from_settings(self.settings).seed_catalog:
            await self.catalog.seed_defaults()

    async def shutdown(self) -> None:
        await self.transaction.drain_notifications(timeout=self.settings.notification_timeout)


def build_dispatcher(settings: Settings, repository: BookingRepository) -> NotificationDispatcher:
    config = NotificationConfig.from_settings(settings)
    if config.is_configured():
        return EmailNotificationDispatcher(repository, config)
    logger.info("RESEND_API_KEY not set; confirmations are logged only")
    return LoggingNotificationDispatcher()


def build_container(
    settings: Settings,
    repository: Optional[BookingRepository] = None,
    dispatcher: Optional[NotificationDispatcher] = None,
) -> ServiceContainer:
    db = DatabaseConfig.from_settings(settings)
    repository = repository or BookingRepository(db.database_path, timeout=db.connection_timeout)
    catalog = CatalogService(repository)
    dispatcher = dispatcher or build_dispatcher(settings, repository)
    transaction = BookingTransaction(
        repository,
        catalog,
        dispatcher,
        notification_timeout=settings.notification_timeout,
    )
    return ServiceContainer(
        settings=settings,
        repository=repository,
        catalog=catalog,
        dispatcher=dispatcher,
        transaction=transaction,
    )
