"""
Project endpoints for API v1.

Projects may be created or updated together with an invoice sent as a
base64 data URI in ``invoiceFileData``.  The file is written to the
configured uploads directory; a payload that is not a data URI is
rejected with 400.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from office_admin_api.app.core.config import Settings, get_settings
from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.core.uploads import InvalidFilePayload
from office_admin_api.app.schemas.common import ProjectStatus
from office_admin_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from office_admin_api.app.services.project_service import ProjectService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ProjectRead])
async def list_projects(
    status_filter: Optional[ProjectStatus] = Query(None, alias="status"),
    client_id: Optional[int] = Query(None, alias="clientId"),
    store: Store = Depends(get_store),
) -> List[ProjectRead]:
    """Return projects, optionally filtered.

    ``status`` takes precedence over ``clientId`` when both are given.
    """
    if status_filter is not None:
        return await ProjectService.list_projects_by_status(store, ProjectStatus(status_filter).value)
    if client_id is not None:
        return await ProjectService.list_projects_by_client(store, client_id)
    return await ProjectService.list_projects(store)


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(project_id: int, store: Store = Depends(get_store)) -> ProjectRead:
    project = await ProjectService.get_project(store, project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> ProjectRead:
    try:
        return await ProjectService.create_project(store, project_in, app_settings.uploads_dir)
    except InvalidFilePayload as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: int,
    project_in: ProjectUpdate,
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> ProjectRead:
    """Update a project, replacing its invoice if a new one is sent."""
    try:
        project = await ProjectService.update_project(store, project_id, project_in, app_settings.uploads_dir)
    except InvalidFilePayload as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: int, store: Store = Depends(get_store)) -> None:
    """Delete a project and its invoice file.

    The record is deleted even if the invoice file cannot be removed.
    """
    if not await ProjectService.delete_project(store, project_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return None
