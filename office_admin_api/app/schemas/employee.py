"""
Pydantic models for employees and their client assignments.
"""

from typing import Optional

from pydantic import Field

from .common import ApiModel, EmployeeRole, PatchModel


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class EmployeeCreate(ApiModel):
    name: str = Field(..., min_length=1, examples=["John Doe"])
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["john@example.com"])
    role: EmployeeRole
    active_status: bool = True


class EmployeeUpdate(PatchModel):
    required_fields = ("name", "email", "role", "active_status")

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    role: Optional[EmployeeRole] = None
    active_status: Optional[bool] = None


class EmployeeRead(EmployeeCreate):
    id: int


class EmployeeClientRead(ApiModel):
    employee_id: int
    client_id: int
