"""
Scheduling Domain

Appointment scheduling engine: recurrence, availability, status machine,
drag and drop rescheduling and financial reporting.
"""
