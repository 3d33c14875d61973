"""
Base models and mixins for the database
"""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    """Record ids are UUID strings."""
    return str(uuid.uuid4())


class TimestampMixin:
    """Mixin con timestamp di creazione e aggiornamento.

    Ora locale senza fuso, come gli orari degli appuntamenti.
    """

    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)
