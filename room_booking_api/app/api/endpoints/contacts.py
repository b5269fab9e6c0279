"""
Contact endpoints.

Contacts are public: listing, fetching and creating them does not
require a token.
"""

from typing import List

from fastapi import APIRouter, Path

from room_booking_api.app.schemas.contact import ContactCreate, ContactRead, ContactResponse
from room_booking_api.app.services.contact_service import ContactService


router = APIRouter()


@router.get("", response_model=List[ContactRead])
async def list_contacts() -> List[ContactRead]:
    return await ContactService.list_contacts()


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(contact_id: int = Path(..., description="ID of the contact")) -> ContactRead:
    return await ContactService.get_contact(contact_id)


@router.post("", response_model=ContactResponse)
async def create_contact(contact: ContactCreate) -> ContactResponse:
    created = await ContactService.create_contact(contact)
    return ContactResponse(message="Contact created", contact=created)
