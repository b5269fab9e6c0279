"""
Pydantic models for rooms.

Rooms are seed data: the API only reads them.  Any additional fields
present in the store (name, description, images and so on) are
passed through to clients unchanged.
"""

from typing import List, Union

from pydantic import ConfigDict

from . import CamelModel


class RoomRead(CamelModel):
    model_config = ConfigDict(extra="allow")

    id: int
    max_guests: int
    price_per_night: Union[int, float]
    available_dates: List[str] = []
