"""
Scheduling Infrastructure Layer

Adapters for the application ports: record stores, the WhatsApp link
sender and the clock ticker.
"""
