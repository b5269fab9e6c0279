"""Pydantic models for contacts."""

from typing import Optional, Union

from pydantic import Field

from . import CamelModel


class ContactCreate(CamelModel):
    title: str = Field(..., examples=["Mr"])
    name: str = Field(..., examples=["John Smith"])
    email: str = Field(..., examples=["john@example.com"])
    user_id: Optional[Union[int, str]] = None


class ContactRead(ContactCreate):
    id: int


class ContactResponse(CamelModel):
    message: str
    contact: ContactRead
