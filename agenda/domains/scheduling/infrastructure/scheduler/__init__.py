"""Scheduler infrastructure."""

from .clock_ticker import ClockTicker

__all__ = ["ClockTicker"]
