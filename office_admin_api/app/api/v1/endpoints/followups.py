"""
Follow-up endpoints for API v1.

The list endpoint accepts one filter at a time.  When several query
parameters are sent, ``status`` wins over ``clientId``, which wins over
``employeeId``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.schemas.common import FollowUpStatus
from office_admin_api.app.schemas.followup import FollowUpCreate, FollowUpRead, FollowUpUpdate
from office_admin_api.app.services.followup_service import FollowUpService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[FollowUpRead])
async def list_followups(
    status_filter: Optional[FollowUpStatus] = Query(None, alias="status"),
    client_id: Optional[int] = Query(None, alias="clientId"),
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    store: Store = Depends(get_store),
) -> List[FollowUpRead]:
    if status_filter is not None:
        return await FollowUpService.list_followups_by_status(store, FollowUpStatus(status_filter).value)
    if client_id is not None:
        return await FollowUpService.list_followups_by_client(store, client_id)
    if employee_id is not None:
        return await FollowUpService.list_followups_by_employee(store, employee_id)
    return await FollowUpService.list_followups(store)


@router.get("/{followup_id}", response_model=FollowUpRead)
async def get_followup(followup_id: int, store: Store = Depends(get_store)) -> FollowUpRead:
    followup = await FollowUpService.get_followup(store, followup_id)
    if followup is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Follow-up not found")
    return followup


@router.post("", response_model=FollowUpRead, status_code=status.HTTP_201_CREATED)
async def create_followup(
    followup_in: FollowUpCreate,
    store: Store = Depends(get_store),
    current_user: dict = Depends(get_current_user),
) -> FollowUpRead:
    """Create a follow-up.

    ``createdById`` defaults to the id of the logged-in user.
    """
    return await FollowUpService.create_followup(store, followup_in, created_by_id=current_user["id"])


@router.put("/{followup_id}", response_model=FollowUpRead)
async def update_followup(
    followup_id: int,
    followup_in: FollowUpUpdate,
    store: Store = Depends(get_store),
) -> FollowUpRead:
    followup = await FollowUpService.update_followup(store, followup_id, followup_in)
    if followup is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Follow-up not found")
    return followup


@router.delete("/{followup_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_followup(followup_id: int, store: Store = Depends(get_store)) -> None:
    if not await FollowUpService.delete_followup(store, followup_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Follow-up not found")
    return None
