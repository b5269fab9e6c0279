"""
Business logic for contacts.

Contacts are created and read without authentication.  The
``userId`` field records who created a contact but is not used to
restrict access.
"""

import logging
from typing import List

from ..core import store
from ..core.errors import ContactNotFound
from ..schemas.contact import ContactCreate, ContactRead


logger = logging.getLogger(__name__)


class ContactService:
    @classmethod
    async def list_contacts(cls) -> List[ContactRead]:
        return [ContactRead.model_validate(c) for c in store.read("contacts")]

    @classmethod
    async def get_contact(cls, contact_id: int) -> ContactRead:
        """Retrieve a contact by ID or raise ``ContactNotFound``."""
        for contact in store.read("contacts"):
            if contact.get("id") == contact_id:
                return ContactRead.model_validate(contact)
        raise ContactNotFound()

    @classmethod
    async def create_contact(cls, data: ContactCreate) -> ContactRead:
        with store.collection("contacts") as contacts:
            record = {"id": store.next_id(contacts), **data.model_dump(by_alias=True)}
            contacts.append(record)
        logger.info("Created contact %s", record["id"])
        return ContactRead.model_validate(record)
