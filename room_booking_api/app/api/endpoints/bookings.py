"""
Booking endpoints.

All routes require a bearer token.  The owner of a booking is always
the authenticated caller: a ``userId`` sent by the client, either as a
query parameter or in the body, is accepted but not trusted.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query

from room_booking_api.app.core.errors import MissingField
from room_booking_api.app.core.security import get_current_user
from room_booking_api.app.schemas import MessageResponse
from room_booking_api.app.schemas.booking import BookingCreate, BookingRead, BookingResponse
from room_booking_api.app.services.booking_service import BookingService


router = APIRouter()


@router.get("", response_model=List[BookingRead])
async def list_bookings(
    user_id: Optional[str] = Query(None, alias="userId", description="Ignored; bookings of the caller are returned"),
    current_user: dict = Depends(get_current_user),
) -> List[BookingRead]:
    """List the bookings of the authenticated user."""
    return await BookingService.list_bookings(current_user["id"])


@router.post("", response_model=BookingResponse)
async def create_booking(
    booking: BookingCreate,
    current_user: dict = Depends(get_current_user),
) -> BookingResponse:
    """Book a room for the authenticated user."""
    created = await BookingService.create_booking(current_user["id"], booking)
    return BookingResponse(message="Booking created", booking=created)


def _parse_booking_id(raw: str) -> Optional[int]:
    """Convert a path segment to a booking id; non‑numeric ids match nothing."""
    try:
        return int(raw)
    except ValueError:
        return None


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking_contact(
    booking_id: str = Path(..., description="ID of the booking"),
    body: Optional[dict] = Body(None),
    current_user: dict = Depends(get_current_user),
) -> BookingResponse:
    """Link one of the caller's bookings to a contact.

    The body must contain ``contactId``; otherwise 400 is returned and
    the booking is left untouched.  404 is returned when the booking
    or the contact does not exist.
    """
    contact_id = (body or {}).get("contactId")
    if contact_id is None or contact_id == "":
        raise MissingField("contactId is required")
    updated = await BookingService.set_contact(_parse_booking_id(booking_id), current_user["id"], contact_id)
    return BookingResponse(message="Booking updated", booking=updated)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def cancel_booking(
    booking_id: str = Path(..., description="ID of the booking"),
    current_user: dict = Depends(get_current_user),
) -> MessageResponse:
    """Cancel one of the caller's bookings.

    The response is the same whether or not a booking was removed, so
    it does not reveal whether a booking id exists for another user.
    """
    await BookingService.cancel_booking(_parse_booking_id(booking_id), current_user["id"])
    return MessageResponse(message="Booking cancelled")
