"""
Appointment model
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Numeric, String, Text

from .base import Base, TimestampMixin, new_id


class AppointmentRecord(Base, TimestampMixin):
    """Appuntamenti del calendario"""

    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=new_id)
    patient_id = Column(String(36), ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)

    # Local wall-clock times, no timezone
    start_at = Column(DateTime, nullable=False)
    end_at = Column(DateTime, nullable=False)

    status = Column(String(20), nullable=False, default="booked")  # booked | confirmed | done | cancelled
    is_paid = Column(Boolean, nullable=False, default=False)

    location = Column(String(20), nullable=False, default="studio")  # studio | domicile
    clinic_site = Column(String(200), nullable=True)
    domicile_address = Column(String(300), nullable=True)

    treatment_type = Column(String(20), nullable=False, default="seduta")  # seduta | macchinario
    price_type = Column(String(20), nullable=False, default="invoiced")  # invoiced | cash
    amount = Column(Numeric(10, 2), nullable=True)

    calendar_note = Column(Text, nullable=True)

    whatsapp_sent = Column(Boolean, nullable=False, default=False)
    whatsapp_sent_at = Column(DateTime, nullable=True)

    __table_args__ = (Index("ix_appointments_start_at", "start_at"),)
