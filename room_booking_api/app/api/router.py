"""
Top‑level API router.

Aggregates the per‑resource routers.  Users routes sit directly under
the API prefix (``/api/register``, ``/api/login``, ``/api/me``); the
other resources get their own prefix.
"""

from fastapi import APIRouter

from .endpoints import bookings, contacts, rooms, users

router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(rooms.router, prefix="/rooms", tags=["rooms"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
