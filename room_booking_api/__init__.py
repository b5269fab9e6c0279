"""
Top‑level package for the Room Booking API.

The server lives in the ``app`` subpackage (importable as
``room_booking_api.app.main``) and a small HTTP client for the API is
provided by ``room_booking_api.client``.
"""

__all__ = []
