"""
Invoice model (read-only for the scheduling engine, used by reports)
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String

from .base import Base, new_id


class Invoice(Base):
    """Fatture"""

    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, default=new_id)
    patient_id = Column(String(36), ForeignKey("patients.id", ondelete="SET NULL"), nullable=True, index=True)
    amount = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(20), nullable=False, default="not_paid")  # paid | not_paid
    paid_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
