"""
Service layer for the service catalog.

A catalog service is a recurring offering with a billing frequency and a
base price.  Clients subscribe to services through the
``client_services`` association; linking the same pair twice keeps a
single link.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.service import (
    ClientServiceRead,
    ServiceCreate,
    ServiceRead,
    ServiceUpdate,
)


class CatalogService:
    """Service class for catalog entries and client subscriptions."""

    @classmethod
    async def create_service(cls, store: Store, data: ServiceCreate) -> ServiceRead:
        logger = logging.getLogger(__name__)
        record = store.services.insert(data.model_dump())
        logger.info("Created service %s (%s)", record["id"], record["name"])
        return ServiceRead.model_validate(record)

    @classmethod
    async def list_services(cls, store: Store) -> List[ServiceRead]:
        return [ServiceRead.model_validate(record) for record in store.services.all()]

    @classmethod
    async def get_service(cls, store: Store, service_id: int) -> Optional[ServiceRead]:
        record = store.services.get(service_id)
        return ServiceRead.model_validate(record) if record else None

    @classmethod
    async def update_service(cls, store: Store, service_id: int, data: ServiceUpdate) -> Optional[ServiceRead]:
        logger = logging.getLogger(__name__)
        record = store.services.update(service_id, data.changes())
        if record is None:
            return None
        logger.info("Updated service %s", service_id)
        return ServiceRead.model_validate(record)

    @classmethod
    async def delete_service(cls, store: Store, service_id: int) -> bool:
        logger = logging.getLogger(__name__)
        deleted = store.services.delete(service_id)
        if deleted:
            logger.info("Deleted service %s", service_id)
        return deleted

    # ------------------------------------------------------------------
    # Client subscriptions
    # ------------------------------------------------------------------
    @classmethod
    async def list_services_by_client(cls, store: Store, client_id: int) -> List[ServiceRead]:
        """Return the catalog entries a client is subscribed to."""
        linked = set(store.client_services.rights_for(client_id))
        return [
            ServiceRead.model_validate(record)
            for record in store.services.all()
            if record["id"] in linked
        ]

    @classmethod
    async def list_client_services(cls, store: Store, client_id: int) -> List[ClientServiceRead]:
        return [ClientServiceRead.model_validate(link) for link in store.client_services.for_left(client_id)]

    @classmethod
    async def add_service_to_client(
        cls, store: Store, client_id: int, service_id: int
    ) -> Optional[ClientServiceRead]:
        """Subscribe a client to a service.

        Both records must exist; ``None`` is returned otherwise.  Adding
        an existing link overwrites it.
        """
        logger = logging.getLogger(__name__)
        if store.clients.get(client_id) is None or store.services.get(service_id) is None:
            return None
        link = store.client_services.add(client_id, service_id)
        logger.info("Linked service %s to client %s", service_id, client_id)
        return ClientServiceRead.model_validate(link)

    @classmethod
    async def remove_service_from_client(cls, store: Store, client_id: int, service_id: int) -> bool:
        return store.client_services.remove(client_id, service_id)
