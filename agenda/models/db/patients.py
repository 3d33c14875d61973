"""
Patient model (owned by the patient registry, read here for names and phones)
"""

from sqlalchemy import Column, String

from .base import Base, TimestampMixin, new_id


class Patient(Base, TimestampMixin):
    """Pazienti dello studio"""

    __tablename__ = "patients"

    id = Column(String(36), primary_key=True, default=new_id)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    phone = Column(String(30), nullable=True)
    status = Column(String(30), nullable=True)  # e.g. "da_completare"
