"""
Project document endpoints for API v1.

Documents are listed and uploaded under their project
(``/projects/{id}/documents``) and deleted by their own id
(``/documents/{id}``).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from office_admin_api.app.core.config import Settings, get_settings
from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.core.uploads import InvalidFilePayload
from office_admin_api.app.schemas.project import DocumentRead, DocumentUpload
from office_admin_api.app.services.document_service import DocumentService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/projects/{project_id}/documents", response_model=List[DocumentRead])
async def list_documents(project_id: int, store: Store = Depends(get_store)) -> List[DocumentRead]:
    return await DocumentService.list_documents(store, project_id)


@router.post(
    "/projects/{project_id}/documents",
    response_model=DocumentRead,
    status_code=status.HTTP_201_CREATED,
)
async def upload_document(
    project_id: int,
    document_in: DocumentUpload,
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> DocumentRead:
    """Attach a file to a project.

    The body must carry ``filename`` and ``fileData`` (a base64 data URI);
    a missing field or an undecodable payload is answered with 400.
    """
    try:
        document = await DocumentService.upload_document(
            store, project_id, document_in, app_settings.uploads_dir
        )
    except InvalidFilePayload as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if document is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return document


@router.delete("/documents/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(document_id: int, store: Store = Depends(get_store)) -> None:
    if not await DocumentService.delete_document(store, document_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return None
