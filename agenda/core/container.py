# ============================================================================
# SCOPE: GLOBAL
# Description: Contenedor di dipendenze dell'agenda (singleton).
#              Collega record store, listino prezzi e use case.
# ============================================================================
"""
Dependency Injection Container.

Wires the concrete adapters (record store, WhatsApp link sender) to the
scheduling use cases.
"""

import logging

from agenda.config.settings import Settings, get_settings
from agenda.domains.scheduling.application.ports import INotificationSender, IRecordStore
from agenda.domains.scheduling.application.services import ReminderComposer
from agenda.domains.scheduling.application.use_cases import (
    BuildFinancialReportUseCase,
    CreateAppointmentsUseCase,
    DeleteAppointmentUseCase,
    DuplicateAppointmentUseCase,
    ExportAppointmentsUseCase,
    GetAvailabilityUseCase,
    LoadCalendarWindowUseCase,
    MarkReminderSentUseCase,
    MoveAppointmentUseCase,
    SaveAppointmentUseCase,
    SendReminderUseCase,
    SetPaymentUseCase,
    ToggleDoneUseCase,
    UpdateAppointmentStatusUseCase,
)
from agenda.domains.scheduling.domain.value_objects import PriceList
from agenda.domains.scheduling.infrastructure.notification import WhatsAppWebLinkSender

logger = logging.getLogger(__name__)


class SchedulingContainer:
    """
    Scheduling container.

    Single Responsibility: Create the record store, shared services and use cases.
    """

    def __init__(self, settings: Settings | None = None, store: IRecordStore | None = None):
        """
        Initialize container.

        Args:
            settings: Application settings (uses default if not provided)
            store: Record store override, e.g. an InMemoryRecordStore in tests
        """
        self.settings = settings or get_settings()
        self._store = store
        self._prices: PriceList | None = None
        self._sender: INotificationSender | None = None

        logger.info("SchedulingContainer initialized")

    # ==================== SHARED ====================

    def get_store(self) -> IRecordStore:
        """Get record store (singleton), SQLAlchemy by default."""
        if self._store is None:
            from agenda.database import get_session_factory
            from agenda.domains.scheduling.infrastructure.persistence import SQLAlchemyRecordStore

            logger.info("Creating SQLAlchemyRecordStore")
            self._store = SQLAlchemyRecordStore(get_session_factory())
        return self._store

    def get_prices(self) -> PriceList:
        if self._prices is None:
            self._prices = PriceList.from_settings(self.settings)
        return self._prices

    def get_sender(self) -> INotificationSender:
        if self._sender is None:
            self._sender = WhatsAppWebLinkSender(
                base_url=self.settings.WHATSAPP_WEB_URL,
                country_prefix=self.settings.PHONE_COUNTRY_PREFIX,
            )
        return self._sender

    def create_reminder_composer(self) -> ReminderComposer:
        return ReminderComposer(
            store=self.get_store(),
            sender=self.get_sender(),
            clinic_addresses=self.settings.CLINIC_ADDRESSES,
            default_site=self.settings.DEFAULT_CLINIC_SITE,
            signature=self.settings.PRACTITIONER_SIGNATURE,
        )

    # ==================== USE CASES ====================

    def create_load_calendar_window_use_case(self) -> LoadCalendarWindowUseCase:
        return LoadCalendarWindowUseCase(store=self.get_store())

    def create_get_availability_use_case(self) -> GetAvailabilityUseCase:
        return GetAvailabilityUseCase(
            store=self.get_store(),
            start_hour=self.settings.DAY_START_HOUR,
            end_hour=self.settings.DAY_END_HOUR,
            slot_minutes=self.settings.SLOT_MINUTES,
        )

    def create_create_appointments_use_case(self) -> CreateAppointmentsUseCase:
        """Create CreateAppointmentsUseCase with dependencies."""
        return CreateAppointmentsUseCase(
            store=self.get_store(),
            prices=self.get_prices(),
            composer=self.create_reminder_composer(),
            auto_apply_prices=self.settings.AUTO_APPLY_PRICES,
            max_occurrences=self.settings.RECURRENCE_MAX_OCCURRENCES,
        )

    def create_duplicate_appointment_use_case(self) -> DuplicateAppointmentUseCase:
        return DuplicateAppointmentUseCase(store=self.get_store())

    def create_save_appointment_use_case(self) -> SaveAppointmentUseCase:
        return SaveAppointmentUseCase(store=self.get_store())

    def create_update_status_use_case(self) -> UpdateAppointmentStatusUseCase:
        return UpdateAppointmentStatusUseCase(store=self.get_store())

    def create_toggle_done_use_case(self) -> ToggleDoneUseCase:
        return ToggleDoneUseCase(store=self.get_store())

    def create_set_payment_use_case(self) -> SetPaymentUseCase:
        return SetPaymentUseCase(store=self.get_store())

    def create_move_appointment_use_case(self) -> MoveAppointmentUseCase:
        return MoveAppointmentUseCase(store=self.get_store())

    def create_delete_appointment_use_case(self) -> DeleteAppointmentUseCase:
        return DeleteAppointmentUseCase(store=self.get_store())

    def create_send_reminder_use_case(self) -> SendReminderUseCase:
        return SendReminderUseCase(store=self.get_store(), composer=self.create_reminder_composer())

    def create_mark_reminder_sent_use_case(self) -> MarkReminderSentUseCase:
        return MarkReminderSentUseCase(store=self.get_store())

    def create_build_financial_report_use_case(self) -> BuildFinancialReportUseCase:
        return BuildFinancialReportUseCase(store=self.get_store(), prices=self.get_prices())

    def create_export_appointments_use_case(self) -> ExportAppointmentsUseCase:
        return ExportAppointmentsUseCase(prices=self.get_prices())


# Singleton
_container: SchedulingContainer | None = None


def get_container() -> SchedulingContainer:
    """Get the application-wide container, creating it on first use."""
    global _container
    if _container is None:
        _container = SchedulingContainer()
    return _container


def reset_container() -> None:
    global _container
    _container = None
