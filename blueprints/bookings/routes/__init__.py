"""Booking route modules."""
