"""
Service layer for follow-up tasks.

Follow-ups are assigned to an employee and may reference a client and a
project.  Referenced ids are stored as given; they are not checked
against the other tables.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.followup import FollowUpCreate, FollowUpRead, FollowUpUpdate


logger = logging.getLogger(__name__)


class FollowUpService:
    """Service class for managing follow-up tasks."""

    @classmethod
    async def create_followup(
        cls, store: Store, data: FollowUpCreate, created_by_id: Optional[int] = None
    ) -> FollowUpRead:
        """Store a follow-up.

        ``created_by_id`` fills in the creator when the payload does not
        name one.

        Raises
        ------
        ValueError
            If neither the payload nor the caller provides a creator.
        """
        values = data.model_dump()
        if values.get("created_by_id") is None:
            values["created_by_id"] = created_by_id
        if values["created_by_id"] is None:
            raise ValueError("createdById is required")
        record = store.followups.insert(values)
        logger.info(
            "Created follow-up %s assigned to employee %s", record["id"], record["assigned_employee_id"]
        )
        return FollowUpRead.model_validate(record)

    @classmethod
    async def list_followups(cls, store: Store) -> List[FollowUpRead]:
        return [FollowUpRead.model_validate(record) for record in store.followups.all()]

    @classmethod
    async def list_followups_by_client(cls, store: Store, client_id: int) -> List[FollowUpRead]:
        return [FollowUpRead.model_validate(record) for record in store.followups.filter(client_id=client_id)]

    @classmethod
    async def list_followups_by_employee(cls, store: Store, employee_id: int) -> List[FollowUpRead]:
        return [
            FollowUpRead.model_validate(record)
            for record in store.followups.filter(assigned_employee_id=employee_id)
        ]

    @classmethod
    async def list_followups_by_status(cls, store: Store, status: str) -> List[FollowUpRead]:
        return [FollowUpRead.model_validate(record) for record in store.followups.filter(status=status)]

    @classmethod
    async def get_followup(cls, store: Store, followup_id: int) -> Optional[FollowUpRead]:
        record = store.followups.get(followup_id)
        return FollowUpRead.model_validate(record) if record else None

    @classmethod
    async def update_followup(
        cls, store: Store, followup_id: int, data: FollowUpUpdate
    ) -> Optional[FollowUpRead]:
        record = store.followups.update(followup_id, data.changes())
        if record is None:
            return None
        logger.info("Updated follow-up %s", followup_id)
        return FollowUpRead.model_validate(record)

    @classmethod
    async def delete_followup(cls, store: Store, followup_id: int) -> bool:
        deleted = store.followups.delete(followup_id)
        if deleted:
            logger.info("Deleted follow-up %s", followup_id)
        return deleted
