# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Composition of WhatsApp reminder and confirmation messages.
# ============================================================================
"""Reminder Message Composer.

Builds the text of reminder and confirmation messages from the practice's
templates (table ``message_templates``) or the built-in texts, and turns
it into a deep link through the notification sender.
"""

import logging
from datetime import date
from typing import TYPE_CHECKING

from agenda.core.domain.exceptions import ReferenceException
from agenda.core.shared.dates import format_time, relative_day_label

from ...domain.entities.appointment import Appointment
from ...domain.value_objects.care_setting import Location
from ..dto.appointment_dtos import ReminderPreview
from ..ports.record_store import Filter
from ..utils.row_mapper import MESSAGE_TEMPLATES_TABLE

if TYPE_CHECKING:
    from ..ports import INotificationSender, IRecordStore

logger = logging.getLogger(__name__)

REMINDER_TEMPLATE_NAME = "Promemoria"
CONFIRMATION_TEMPLATE_NAME = "Appuntamento"

DEFAULT_REMINDER_TEMPLATE = """Buongiorno {nome},

Le ricordiamo il suo appuntamento di {data_relativa} alle ore ⏰ {ora}.

📍 {luogo}

Cordiali saluti,
{firma}"""

DEFAULT_CONFIRMATION_TEMPLATE = """Grazie per averci scelto.
Ricordiamo il prossimo appuntamento fissato per {data_relativa} alle {ora}.

📍 {luogo}

A presto,
{firma}"""

DEFAULT_PATIENT_NAME = "Cliente"


class ReminderComposer:
    """Composes reminder/confirmation previews for an appointment."""

    def __init__(
        self,
        store: "IRecordStore",
        sender: "INotificationSender",
        clinic_addresses: dict[str, str] | None = None,
        default_site: str = "",
        signature: str = "",
    ) -> None:
        self._store = store
        self._sender = sender
        self._clinic_addresses = clinic_addresses or {}
        self._default_site = default_site
        self._signature = signature

    async def template_text(self, is_confirmation: bool) -> str:
        """Practice override if one exists, else the built-in text."""
        name = CONFIRMATION_TEMPLATE_NAME if is_confirmation else REMINDER_TEMPLATE_NAME
        response = await self._store.select(MESSAGE_TEMPLATES_TABLE, [Filter.eq("name", name)], limit=1)
        if not response.success:
            logger.warning(f"Could not load message template '{name}': {response.error_message}")
        else:
            template = response.get_dict().get("template")
            if template:
                return template
        default = DEFAULT_CONFIRMATION_TEMPLATE if is_confirmation else DEFAULT_REMINDER_TEMPLATE
        return default.replace("{firma}", self._signature)

    def place(self, appointment: Appointment) -> str:
        if appointment.location == Location.DOMICILE:
            return f"Presso il suo domicilio ({appointment.domicile_address or ''})"
        site = appointment.clinic_site or self._default_site
        return self._clinic_addresses.get(site) or site

    def render(self, template: str, appointment: Appointment, today: date | None = None) -> str:
        first_name = (appointment.patient_first_name or "").strip() or DEFAULT_PATIENT_NAME
        return (
            template.replace("{nome}", first_name)
            .replace("{data_relativa}", relative_day_label(appointment.start, today))
            .replace("{ora}", format_time(appointment.start))
            .replace("{luogo}", self.place(appointment))
        )

    async def preview(
        self,
        appointment: Appointment,
        is_confirmation: bool = False,
        today: date | None = None,
    ) -> ReminderPreview:
        """Build the message and its link.

        Raises:
            ReferenceException: If the patient has no phone number.
        """
        phone = (appointment.patient_phone or "").strip()
        if not phone:
            raise ReferenceException("patient_phone", "Nessun telefono registrato per questo paziente")

        template = await self.template_text(is_confirmation)
        message = self.render(template, appointment, today)
        url = self._sender.build_link(phone, message)
        heading = "CONFERMA NUOVO APPUNTAMENTO WHATSAPP" if is_confirmation else "INVIO PROMEMORIA WHATSAPP"
        confirm_text = (
            f"📱 {heading}\n\nDestinatario: {phone}\n\nMessaggio:\n{message}\n\n"
            "Clicca OK per aprire WhatsApp e inviare."
        )
        return ReminderPreview(phone=phone, message=message, url=url, confirm_text=confirm_text)
