"""
New-client contact endpoints for API v1.

CRUD for sales leads plus ``POST /contacts/{id}/convert``, which marks a
lead as converted into an existing client.  The client id is recorded
as given and is not checked.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.schemas.contact import ContactConvert, ContactCreate, ContactRead, ContactUpdate
from office_admin_api.app.services.contact_service import ContactService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ContactRead])
async def list_contacts(store: Store = Depends(get_store)) -> List[ContactRead]:
    return await ContactService.list_contacts(store)


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(contact_id: int, store: Store = Depends(get_store)) -> ContactRead:
    contact = await ContactService.get_contact(store, contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
async def create_contact(contact_in: ContactCreate, store: Store = Depends(get_store)) -> ContactRead:
    return await ContactService.create_contact(store, contact_in)


@router.put("/{contact_id}", response_model=ContactRead)
async def update_contact(
    contact_id: int,
    contact_in: ContactUpdate,
    store: Store = Depends(get_store),
) -> ContactRead:
    contact = await ContactService.update_contact(store, contact_id, contact_in)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(contact_id: int, store: Store = Depends(get_store)) -> None:
    if not await ContactService.delete_contact(store, contact_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return None


@router.post("/{contact_id}/convert")
async def convert_contact(
    contact_id: int,
    body: ContactConvert,
    store: Store = Depends(get_store),
) -> Dict[str, bool]:
    """Mark a contact as converted into the client given as ``clientId``."""
    if not await ContactService.convert_contact_to_client(store, contact_id, body.client_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return {"success": True}
