"""Studio Agenda: appointment scheduling for a physiotherapy practice."""

__version__ = "1.0.0"
