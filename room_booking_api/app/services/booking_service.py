"""
Business logic for room bookings.

Bookings always belong to the authenticated user who created them.
Listing, contact linking and cancellation only ever see the caller's
own bookings.  Every mutation runs as a locked read‑modify‑write of
the ``bookings`` collection.
"""

import logging
from typing import List, Optional, Union

from ..core import store
from ..core.errors import BookingNotFound, ContactNotFound
from ..schemas.booking import BookingCreate, BookingRead


logger = logging.getLogger(__name__)


class BookingService:
    """Service for creating, linking and cancelling bookings."""

    @classmethod
    async def list_bookings(cls, user_id: int) -> List[BookingRead]:
        """Return the bookings owned by ``user_id`` in stored order."""
        bookings = store.read("bookings")
        return [BookingRead.model_validate(b) for b in bookings if b.get("userId") == user_id]

    @classmethod
    async def create_booking(cls, user_id: int, data: BookingCreate) -> BookingRead:
        """Create a booking owned by ``user_id``.

        Any ``userId`` supplied in ``data`` is ignored.  The new booking
        starts without a contact.
        """
        if data.user_id is not None and data.user_id != user_id:
            logger.warning(
                "Ignoring client supplied userId %s for booking by user %s", data.user_id, user_id
            )
        with store.collection("bookings") as bookings:
            record = {
                "id": store.next_id(bookings),
                "userId": user_id,
                "roomId": data.room_id,
                "checkin": data.checkin,
                "checkout": data.checkout,
                "contactId": "",
            }
            bookings.append(record)
        logger.info("User %s booked room %s (booking %s)", user_id, data.room_id, record["id"])
        return BookingRead.model_validate(record)

    @classmethod
    async def set_contact(
        cls, booking_id: Optional[int], user_id: int, contact_id: Union[int, str]
    ) -> BookingRead:
        """Link a booking to a contact.

        Raises ``BookingNotFound`` if no booking with ``booking_id``
        belongs to ``user_id``, then ``ContactNotFound`` if the contact
        does not exist.  Nothing is written in either case.
        """
        with store.collection("bookings") as bookings:
            booking = next(
                (b for b in bookings if b.get("id") == booking_id and b.get("userId") == user_id),
                None,
            )
            if booking is None:
                raise BookingNotFound()
            contacts = store.read("contacts")
            contact = next((c for c in contacts if str(c.get("id")) == str(contact_id)), None)
            if contact is None:
                raise ContactNotFound()
            contact_id = contact["id"]
            booking["contactId"] = contact_id
        logger.info("Booking %s linked to contact %s", booking_id, contact_id)
        return BookingRead.model_validate(booking)

    @classmethod
    async def cancel_booking(cls, booking_id: Optional[int], user_id: int) -> bool:
        """Remove the booking ``booking_id`` if it belongs to ``user_id``.

        Returns whether a booking was removed.  A ``booking_id`` of
        ``None`` matches nothing.  Callers respond the same way in all
        cases.
        """
        with store.collection("bookings") as bookings:
            remaining = [
                b for b in bookings if b.get("id") != booking_id or b.get("userId") != user_id
            ]
            removed = len(remaining) != len(bookings)
            bookings[:] = remaining
        if removed:
            logger.info("User %s cancelled booking %s", user_id, booking_id)
        else:
            logger.info("User %s tried to cancel booking %s, nothing removed", user_id, booking_id)
        return removed
