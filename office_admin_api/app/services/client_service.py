"""
Service layer for clients.

Clients are the customers of the business.  Besides the basic CRUD
operations this service answers which clients an employee is assigned
to.  Deleting a client does not touch its projects, follow-ups or
associations; those keep the dangling ``client_id``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.client import ClientCreate, ClientRead, ClientUpdate


logger = logging.getLogger(__name__)


class ClientService:
    """Service class for managing clients."""

    @classmethod
    async def create_client(cls, store: Store, data: ClientCreate) -> ClientRead:
        record = store.clients.insert(data.model_dump())
        logger.info("Created client %s (%s)", record["id"], record["name"])
        return ClientRead.model_validate(record)

    @classmethod
    async def list_clients(cls, store: Store) -> List[ClientRead]:
        return [ClientRead.model_validate(record) for record in store.clients.all()]

    @classmethod
    async def get_client(cls, store: Store, client_id: int) -> Optional[ClientRead]:
        record = store.clients.get(client_id)
        return ClientRead.model_validate(record) if record else None

    @classmethod
    async def update_client(cls, store: Store, client_id: int, data: ClientUpdate) -> Optional[ClientRead]:
        """Merge the provided fields into a client.

        Returns the updated client or ``None`` if it does not exist.
        """
        record = store.clients.update(client_id, data.changes())
        if record is None:
            return None
        logger.info("Updated client %s", client_id)
        return ClientRead.model_validate(record)

    @classmethod
    async def delete_client(cls, store: Store, client_id: int) -> bool:
        deleted = store.clients.delete(client_id)
        if deleted:
            logger.info("Deleted client %s", client_id)
        return deleted

    @classmethod
    async def list_clients_by_employee(cls, store: Store, employee_id: int) -> List[ClientRead]:
        """Return the clients assigned to an employee, in client order."""
        assigned = set(store.employee_clients.rights_for(employee_id))
        return [
            ClientRead.model_validate(record)
            for record in store.clients.all()
            if record["id"] in assigned
        ]
