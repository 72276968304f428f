"""
Service layer for employees.

Employees are identified by a unique e-mail address.  They can be
assigned to clients; an assignment is a link between the two records
and assigning the same client twice keeps a single link.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.employee import (
    EmployeeClientRead,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)


logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for employees and their client assignments."""

    @staticmethod
    def _ensure_email_available(store: Store, email: str, employee_id: Optional[int] = None) -> None:
        """Raise ``ValueError`` if another employee already uses ``email``.

        The comparison ignores case.
        """
        wanted = email.lower()
        for record in store.employees.all():
            if record["email"].lower() == wanted and record["id"] != employee_id:
                raise ValueError(f"Email {email} is already used by employee {record['id']}")

    @classmethod
    async def create_employee(cls, store: Store, data: EmployeeCreate) -> EmployeeRead:
        cls._ensure_email_available(store, data.email)
        record = store.employees.insert(data.model_dump())
        logger.info("Created employee %s (%s)", record["id"], record["name"])
        return EmployeeRead.model_validate(record)

    @classmethod
    async def list_employees(cls, store: Store) -> List[EmployeeRead]:
        return [EmployeeRead.model_validate(record) for record in store.employees.all()]

    @classmethod
    async def list_employees_by_role(cls, store: Store, role: str) -> List[EmployeeRead]:
        return [EmployeeRead.model_validate(record) for record in store.employees.filter(role=role)]

    @classmethod
    async def get_employee(cls, store: Store, employee_id: int) -> Optional[EmployeeRead]:
        record = store.employees.get(employee_id)
        return EmployeeRead.model_validate(record) if record else None

    @classmethod
    async def update_employee(
        cls, store: Store, employee_id: int, data: EmployeeUpdate
    ) -> Optional[EmployeeRead]:
        """Merge the provided fields into an employee.

        Returns ``None`` if the employee does not exist.

        Raises
        ------
        ValueError
            If the new e-mail address belongs to another employee.
        """
        if store.employees.get(employee_id) is None:
            return None
        changes = data.changes()
        if changes.get("email"):
            cls._ensure_email_available(store, changes["email"], employee_id)
        record = store.employees.update(employee_id, changes)
        logger.info("Updated employee %s", employee_id)
        return EmployeeRead.model_validate(record)

    @classmethod
    async def delete_employee(cls, store: Store, employee_id: int) -> bool:
        deleted = store.employees.delete(employee_id)
        if deleted:
            logger.info("Deleted employee %s", employee_id)
        return deleted

    # ------------------------------------------------------------------
    # Client assignments
    # ------------------------------------------------------------------
    @classmethod
    async def assign_client(cls, store: Store, employee_id: int, client_id: int) -> Optional[EmployeeClientRead]:
        """Assign a client to an employee.

        Returns ``None`` if either record does not exist.
        """
        if store.employees.get(employee_id) is None or store.clients.get(client_id) is None:
            return None
        link = store.employee_clients.add(employee_id, client_id)
        logger.info("Assigned client %s to employee %s", client_id, employee_id)
        return EmployeeClientRead.model_validate(link)

    @classmethod
    async def unassign_client(cls, store: Store, employee_id: int, client_id: int) -> bool:
        removed = store.employee_clients.remove(employee_id, client_id)
        if removed:
            logger.info("Unassigned client %s from employee %s", client_id, employee_id)
        return removed

    @classmethod
    async def list_assigned_client_ids(cls, store: Store, employee_id: int) -> List[int]:
        return store.employee_clients.rights_for(employee_id)
