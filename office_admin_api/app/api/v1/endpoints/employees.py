"""
Employee endpoints for API v1.

CRUD for employees (list filterable by ``role``) and the assignment of
clients to employees under ``/employees/{id}/clients``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.schemas.client import ClientRead
from office_admin_api.app.schemas.common import EmployeeRole
from office_admin_api.app.schemas.employee import (
    EmployeeClientRead,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)
from office_admin_api.app.services.client_service import ClientService
from office_admin_api.app.services.employee_service import EmployeeService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[EmployeeRead])
async def list_employees(
    role: Optional[EmployeeRole] = Query(None),
    store: Store = Depends(get_store),
) -> List[EmployeeRead]:
    if role is not None:
        return await EmployeeService.list_employees_by_role(store, EmployeeRole(role).value)
    return await EmployeeService.list_employees(store)


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(employee_id: int, store: Store = Depends(get_store)) -> EmployeeRead:
    employee = await EmployeeService.get_employee(store, employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(employee_in: EmployeeCreate, store: Store = Depends(get_store)) -> EmployeeRead:
    """Create an employee.  The e-mail address must not be in use."""
    try:
        return await EmployeeService.create_employee(store, employee_in)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    store: Store = Depends(get_store),
) -> EmployeeRead:
    try:
        employee = await EmployeeService.update_employee(store, employee_id, employee_in)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int, store: Store = Depends(get_store)) -> None:
    if not await EmployeeService.delete_employee(store, employee_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return None


# ---------------------------------------------------------------------------
# Client assignments
# ---------------------------------------------------------------------------

@router.get("/{employee_id}/clients", response_model=List[ClientRead])
async def list_employee_clients(employee_id: int, store: Store = Depends(get_store)) -> List[ClientRead]:
    return await ClientService.list_clients_by_employee(store, employee_id)


@router.post(
    "/{employee_id}/clients/{client_id}",
    response_model=EmployeeClientRead,
    status_code=status.HTTP_201_CREATED,
)
async def assign_client(
    employee_id: int,
    client_id: int,
    store: Store = Depends(get_store),
) -> EmployeeClientRead:
    link = await EmployeeService.assign_client(store, employee_id, client_id)
    if link is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee or client not found")
    return link


@router.delete("/{employee_id}/clients/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unassign_client(
    employee_id: int,
    client_id: int,
    store: Store = Depends(get_store),
) -> None:
    if not await EmployeeService.unassign_client(store, employee_id, client_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found")
    return None
