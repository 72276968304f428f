"""
Service layer for new-client contacts (sales leads).

Besides CRUD, a contact can be marked as converted into a client.  The
conversion only records the client id on the contact: it neither checks
that the client exists nor creates it, which is up to the caller.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.contact import ContactCreate, ContactRead, ContactUpdate


logger = logging.getLogger(__name__)


class ContactService:
    """Service class for managing sales leads."""

    @classmethod
    async def create_contact(cls, store: Store, data: ContactCreate) -> ContactRead:
        record = store.contacts.insert(data.model_dump())
        logger.info("Created contact %s (%s)", record["id"], record["contact_name"])
        return ContactRead.model_validate(record)

    @classmethod
    async def list_contacts(cls, store: Store) -> List[ContactRead]:
        return [ContactRead.model_validate(record) for record in store.contacts.all()]

    @classmethod
    async def get_contact(cls, store: Store, contact_id: int) -> Optional[ContactRead]:
        record = store.contacts.get(contact_id)
        return ContactRead.model_validate(record) if record else None

    @classmethod
    async def update_contact(cls, store: Store, contact_id: int, data: ContactUpdate) -> Optional[ContactRead]:
        record = store.contacts.update(contact_id, data.changes())
        if record is None:
            return None
        logger.info("Updated contact %s", contact_id)
        return ContactRead.model_validate(record)

    @classmethod
    async def delete_contact(cls, store: Store, contact_id: int) -> bool:
        deleted = store.contacts.delete(contact_id)
        if deleted:
            logger.info("Deleted contact %s", contact_id)
        return deleted

    @classmethod
    async def convert_contact_to_client(cls, store: Store, contact_id: int, client_id: int) -> bool:
        """Mark a contact as converted into ``client_id``.

        Returns ``False`` only when the contact does not exist.
        """
        record = store.contacts.update(
            contact_id, {"converted_to_client": True, "converted_client_id": client_id}
        )
        if record is None:
            return False
        logger.info("Converted contact %s to client %s", contact_id, client_id)
        return True
