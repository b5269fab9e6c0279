"""
Room endpoints.

Rooms are public and read‑only.
"""

from typing import List, Optional

from fastapi import APIRouter, Path, Query

from room_booking_api.app.schemas.room import RoomRead
from room_booking_api.app.services.room_service import RoomService


router = APIRouter()


@router.get("", response_model=List[RoomRead])
async def list_rooms(
    guests: Optional[int] = Query(None, description="Minimum number of guests the room must hold"),
    check_in_date: Optional[str] = Query(None, alias="checkInDate", description="Date (YYYY-MM-DD) the room must be available on"),
    sort: Optional[str] = Query(None, description="'asc' or 'desc' by price per night"),
) -> List[RoomRead]:
    """List rooms, optionally filtered by capacity and availability and sorted by price."""
    return await RoomService.list_rooms(guests=guests, check_in_date=check_in_date, sort=sort)


@router.get("/{room_id}", response_model=RoomRead)
async def get_room(room_id: int = Path(..., description="ID of the room")) -> RoomRead:
    return await RoomService.get_room(room_id)
