"""
Service catalog endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.schemas.service import ServiceCreate, ServiceRead, ServiceUpdate
from office_admin_api.app.services.catalog_service import CatalogService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ServiceRead])
async def list_services(store: Store = Depends(get_store)) -> List[ServiceRead]:
    return await CatalogService.list_services(store)


@router.get("/{service_id}", response_model=ServiceRead)
async def get_service(service_id: int, store: Store = Depends(get_store)) -> ServiceRead:
    service = await CatalogService.get_service(store, service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
async def create_service(service_in: ServiceCreate, store: Store = Depends(get_store)) -> ServiceRead:
    return await CatalogService.create_service(store, service_in)


@router.put("/{service_id}", response_model=ServiceRead)
async def update_service(
    service_id: int,
    service_in: ServiceUpdate,
    store: Store = Depends(get_store),
) -> ServiceRead:
    service = await CatalogService.update_service(store, service_id, service_in)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(service_id: int, store: Store = Depends(get_store)) -> None:
    if not await CatalogService.delete_service(store, service_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return None
