"""
Pydantic models for room bookings.

A booking ties a user to a room for a ``checkin``/``checkout`` date
range and may later be linked to a contact.  Dates travel as
``YYYY-MM-DD`` strings.
"""

from typing import Optional, Union

from pydantic import Field

from . import CamelModel


class BookingCreate(CamelModel):
    """Schema for creating a booking.

    ``user_id`` is accepted for compatibility with older clients but the
    owner of a new booking is always the authenticated caller.
    """

    room_id: Union[int, str] = Field(..., examples=[1])
    checkin: str = Field(..., examples=["2024-06-01"])
    checkout: str = Field(..., examples=["2024-06-05"])
    user_id: Optional[Union[int, str]] = None


class BookingRead(CamelModel):
    id: int
    user_id: int
    room_id: Union[int, str]
    checkin: str
    checkout: str
    contact_id: Union[int, str] = ""


class BookingResponse(CamelModel):
    message: str
    booking: BookingRead
