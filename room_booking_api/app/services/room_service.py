"""
Business logic for rooms.

Rooms are read‑only seed data.  Listing supports a minimum capacity
filter, an exact availability date filter and sorting by nightly
price.  Filtering works on a copy so the stored order is never
changed.
"""

from typing import List, Optional

from ..core import store
from ..core.errors import RoomNotFound
from ..schemas.room import RoomRead


class RoomService:
    """Read access to the ``rooms`` collection."""

    @classmethod
    async def list_rooms(
        cls,
        guests: Optional[int] = None,
        check_in_date: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> List[RoomRead]:
        """Return rooms matching the given filters.

        Parameters
        ----------
        guests : Optional[int]
            Keep only rooms whose ``maxGuests`` is at least this value.
        check_in_date : Optional[str]
            Keep only rooms whose ``availableDates`` contain this exact
            ``YYYY-MM-DD`` string.
        sort : Optional[str]
            ``"asc"`` or ``"desc"`` orders by ``pricePerNight``; ties keep
            their stored order.  Any other value leaves the stored order.
        """
        rooms = list(store.read("rooms"))
        if guests is not None:
            rooms = [r for r in rooms if r.get("maxGuests", 0) >= guests]
        if check_in_date:
            rooms = [r for r in rooms if check_in_date in r.get("availableDates", [])]
        if sort in ("asc", "desc"):
            rooms = sorted(rooms, key=lambda r: r.get("pricePerNight", 0), reverse=sort == "desc")
        return [RoomRead.model_validate(r) for r in rooms]

    @classmethod
    async def get_room(cls, room_id: int) -> RoomRead:
        for room in store.read("rooms"):
            if room.get("id") == room_id:
                return RoomRead.model_validate(room)
        raise RoomNotFound()
