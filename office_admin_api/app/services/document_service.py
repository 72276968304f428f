"""
Service layer for project documents.

Documents are files attached to a project (plans, photos, signed
quotes).  Each upload is written to the uploads directory under a
timestamped, sanitized name and recorded with its upload time.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from office_admin_api.app.core import uploads
from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.project import DocumentRead, DocumentUpload


class DocumentService:
    """Service class for project attachments."""

    @classmethod
    async def list_documents(cls, store: Store, project_id: int) -> List[DocumentRead]:
        return [DocumentRead.model_validate(record) for record in store.documents.filter(project_id=project_id)]

    @classmethod
    async def get_document(cls, store: Store, document_id: int) -> Optional[DocumentRead]:
        record = store.documents.get(document_id)
        return DocumentRead.model_validate(record) if record else None

    @classmethod
    async def upload_document(
        cls,
        store: Store,
        project_id: int,
        data: DocumentUpload,
        uploads_dir: str,
    ) -> Optional[DocumentRead]:
        """Write an attachment to disk and record it.

        Parameters
        ----------
        store : Store
            Store holding the project.
        project_id : int
            Project receiving the document.
        data : DocumentUpload
            Original filename and the file as a base64 data URI.
        uploads_dir : str
            Directory the file is written to.

        Returns
        -------
        Optional[DocumentRead]
            The new document, or ``None`` if the project does not exist.

        Raises
        ------
        InvalidFilePayload
            If ``file_data`` is not a base64 data URI.
        """
        logger = logging.getLogger(__name__)
        if store.projects.get(project_id) is None:
            return None
        filepath = uploads.save_upload(uploads_dir, data.file_data, uploads.document_filename(data.filename))
        record = store.documents.insert(
            {
                "project_id": project_id,
                "filename": Path(filepath).name,
                "filepath": filepath,
                "upload_date": datetime.now(timezone.utc),
            }
        )
        logger.info("Attached document %s to project %s", record["id"], project_id)
        return DocumentRead.model_validate(record)

    @classmethod
    async def delete_document(cls, store: Store, document_id: int) -> bool:
        """Delete a document record and its file."""
        logger = logging.getLogger(__name__)
        record = store.documents.get(document_id)
        if record is None:
            return False
        uploads.remove_upload(record["filepath"])
        store.documents.delete(document_id)
        logger.info("Deleted document %s", document_id)
        return True
