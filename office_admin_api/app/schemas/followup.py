"""
Pydantic models for follow-up tasks.

A follow-up is a scheduled task assigned to an employee, optionally tied
to a client and to one of its projects, with a due date and a status.
``createdById`` defaults to the id of the user creating the task.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from .common import ApiModel, FollowUpStatus, PatchModel


class FollowUpCreate(ApiModel):
    task_description: str = Field(..., min_length=1, examples=["Call back about the quote"])
    client_id: Optional[int] = None
    related_project_id: Optional[int] = None
    assigned_employee_id: int
    due_date: date
    status: FollowUpStatus = FollowUpStatus.PENDING
    notes: Optional[str] = None
    created_by_id: Optional[int] = None


class FollowUpUpdate(PatchModel):
    required_fields = ("task_description", "assigned_employee_id", "due_date", "status", "created_by_id")

    task_description: Optional[str] = Field(None, min_length=1)
    client_id: Optional[int] = None
    related_project_id: Optional[int] = None
    assigned_employee_id: Optional[int] = None
    due_date: Optional[date] = None
    status: Optional[FollowUpStatus] = None
    notes: Optional[str] = None
    created_by_id: Optional[int] = None


class FollowUpRead(ApiModel):
    id: int
    task_description: str
    client_id: Optional[int] = None
    related_project_id: Optional[int] = None
    assigned_employee_id: int
    due_date: date
    status: FollowUpStatus
    notes: Optional[str] = None
    created_by_id: int
