"""
Pydantic schema definitions for API payloads.

Each resource (users, rooms, bookings, contacts) defines its own
models for request and response bodies.  Field names are snake_case
in Python and camelCase on the wire and in the JSON store.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
