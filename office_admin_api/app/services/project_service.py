"""
Service layer for projects.

Projects belong to one client and may carry an uploaded invoice.  The
invoice arrives as a data URI; this service writes it to the uploads
directory and keeps its path in ``invoice_file``.  Replacing the invoice
deletes the previous file and deleting the project deletes the file it
points to.  Failing to remove a file is logged and otherwise ignored:
the record operation still succeeds.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from office_admin_api.app.core import uploads
from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate


logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for managing projects and their invoices."""

    @classmethod
    async def create_project(cls, store: Store, data: ProjectCreate, uploads_dir: str) -> ProjectRead:
        """Store a new project, saving its invoice first when one is sent.

        Raises
        ------
        InvalidFilePayload
            If ``invoice_file_data`` is not a base64 data URI.
        """
        values = data.model_dump(exclude={"invoice_file_data"})
        values["invoice_file"] = None
        if data.invoice_file_data:
            values["invoice_file"] = uploads.save_upload(
                uploads_dir, data.invoice_file_data, uploads.invoice_filename()
            )
        record = store.projects.insert(values)
        logger.info("Created project %s for client %s", record["id"], record["client_id"])
        return ProjectRead.model_validate(record)

    @classmethod
    async def list_projects(cls, store: Store) -> List[ProjectRead]:
        return [ProjectRead.model_validate(record) for record in store.projects.all()]

    @classmethod
    async def list_projects_by_client(cls, store: Store, client_id: int) -> List[ProjectRead]:
        return [ProjectRead.model_validate(record) for record in store.projects.filter(client_id=client_id)]

    @classmethod
    async def list_projects_by_status(cls, store: Store, status: str) -> List[ProjectRead]:
        return [ProjectRead.model_validate(record) for record in store.projects.filter(status=status)]

    @classmethod
    async def get_project(cls, store: Store, project_id: int) -> Optional[ProjectRead]:
        record = store.projects.get(project_id)
        return ProjectRead.model_validate(record) if record else None

    @classmethod
    async def update_project(
        cls, store: Store, project_id: int, data: ProjectUpdate, uploads_dir: str
    ) -> Optional[ProjectRead]:
        """Merge the provided fields into a project.

        When ``invoice_file_data`` is given the new invoice is written and
        the old file removed.  Returns ``None`` (without writing anything)
        if the project does not exist.
        """
        existing = store.projects.get(project_id)
        if existing is None:
            return None
        changes = data.changes(exclude=("invoice_file_data",))
        if data.invoice_file_data:
            changes["invoice_file"] = uploads.save_upload(
                uploads_dir, data.invoice_file_data, uploads.invoice_filename()
            )
            if existing.get("invoice_file"):
                uploads.remove_upload(existing["invoice_file"])
        record = store.projects.update(project_id, changes)
        logger.info("Updated project %s", project_id)
        return ProjectRead.model_validate(record)

    @classmethod
    async def delete_project(cls, store: Store, project_id: int) -> bool:
        """Delete a project and its invoice file.

        Documents attached to the project are left in place.
        """
        existing = store.projects.get(project_id)
        if existing is None:
            return False
        if existing.get("invoice_file"):
            uploads.remove_upload(existing["invoice_file"])
        store.projects.delete(project_id)
        logger.info("Deleted project %s", project_id)
        return True
