"""
Pydantic models for projects and their documents.

A project is a billable unit of work for one client, tracked from the
request date through execution with its cost, price and status.  The
invoice may be uploaded together with the project as a base64 data URI
in ``invoiceFileData``; the server stores the file and records its path
in ``invoiceFile``, which clients cannot set directly.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from .common import ApiModel, PatchModel, ProjectStatus


class ProjectBase(ApiModel):
    client_id: int = Field(..., examples=[1])
    name: str = Field(..., min_length=1, examples=["Spring clean-up"])
    date_requested: date
    date_of_execution: Optional[date] = None
    description: Optional[str] = None
    cost: float = Field(..., ge=0)
    price: float = Field(..., ge=0)
    duration: Optional[str] = Field(None, examples=["3 days"])
    status: ProjectStatus = ProjectStatus.PENDING


class ProjectCreate(ProjectBase):
    """Schema for creating a project, optionally with its invoice file."""

    invoice_file_data: Optional[str] = Field(
        None, description="Invoice as a data URI, e.g. data:application/pdf;base64,..."
    )


class ProjectUpdate(PatchModel):
    """Schema for updating a project.

    All fields are optional; only provided values are changed.  Sending
    ``invoiceFileData`` replaces the stored invoice and removes the
    previous file.
    """

    required_fields = ("client_id", "name", "date_requested", "cost", "price", "status")

    client_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    date_requested: Optional[date] = None
    date_of_execution: Optional[date] = None
    description: Optional[str] = None
    cost: Optional[float] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    duration: Optional[str] = None
    status: Optional[ProjectStatus] = None
    invoice_file_data: Optional[str] = None


class ProjectRead(ProjectBase):
    id: int
    invoice_file: Optional[str] = None


class DocumentUpload(ApiModel):
    """Payload for attaching a file to a project."""

    filename: str = Field(..., min_length=1, examples=["site-survey.pdf"])
    file_data: str = Field(..., min_length=1, description="File content as a base64 data URI")


class DocumentRead(ApiModel):
    id: int
    project_id: int
    filename: str
    filepath: str
    upload_date: datetime
