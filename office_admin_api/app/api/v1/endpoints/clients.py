"""
Client endpoints for API v1.

CRUD for clients plus the client-service subscriptions nested under
``/clients/{id}/services``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.schemas.client import ClientCreate, ClientRead, ClientUpdate
from office_admin_api.app.schemas.service import ClientServiceRead, ServiceRead
from office_admin_api.app.services.catalog_service import CatalogService
from office_admin_api.app.services.client_service import ClientService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ClientRead])
async def list_clients(store: Store = Depends(get_store)) -> List[ClientRead]:
    return await ClientService.list_clients(store)


@router.get("/{client_id}", response_model=ClientRead)
async def get_client(client_id: int, store: Store = Depends(get_store)) -> ClientRead:
    client = await ClientService.get_client(store, client_id)
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return client


@router.post("", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
async def create_client(client_in: ClientCreate, store: Store = Depends(get_store)) -> ClientRead:
    return await ClientService.create_client(store, client_in)


@router.put("/{client_id}", response_model=ClientRead)
async def update_client(
    client_id: int,
    client_in: ClientUpdate,
    store: Store = Depends(get_store),
) -> ClientRead:
    """Update the provided fields of a client."""
    client = await ClientService.update_client(store, client_id, client_in)
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return client


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(client_id: int, store: Store = Depends(get_store)) -> None:
    """Delete a client.

    Projects, follow-ups and links referencing the client are kept.
    """
    if not await ClientService.delete_client(store, client_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return None


# ---------------------------------------------------------------------------
# Client subscriptions to catalog services
# ---------------------------------------------------------------------------

@router.get("/{client_id}/services", response_model=List[ServiceRead])
async def list_client_services(client_id: int, store: Store = Depends(get_store)) -> List[ServiceRead]:
    """Return the services a client is subscribed to (empty for unknown clients)."""
    return await CatalogService.list_services_by_client(store, client_id)


@router.post(
    "/{client_id}/services/{service_id}",
    response_model=ClientServiceRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_service_to_client(
    client_id: int,
    service_id: int,
    store: Store = Depends(get_store),
) -> ClientServiceRead:
    link = await CatalogService.add_service_to_client(store, client_id, service_id)
    if link is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client or service not found")
    return link


@router.delete("/{client_id}/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_service_from_client(
    client_id: int,
    service_id: int,
    store: Store = Depends(get_store),
) -> None:
    if not await CatalogService.remove_service_from_client(store, client_id, service_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client service not found")
    return None
