"""
Message template model
"""

from sqlalchemy import Column, String, Text

from .base import Base, TimestampMixin, new_id


class MessageTemplate(Base, TimestampMixin):
    """Testi dei messaggi WhatsApp personalizzati ("Promemoria", "Appuntamento")"""

    __tablename__ = "message_templates"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), unique=True, nullable=False)
    template = Column(Text, nullable=False)
