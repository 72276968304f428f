"""
Pydantic models for new-client contacts (sales leads).

A contact records an approach to a prospective client: who was
contacted, when, how, and how they responded.  Once the prospect signs
up, the contact is converted and points at the resulting client.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from .common import ApiModel, ContactMethod, PatchModel, ResponseType


class ContactCreate(ApiModel):
    contact_name: str = Field(..., min_length=1, examples=["Jane Roe"])
    phone_email: str = Field(..., examples=["jane@example.com"])
    contacted_date: date
    contact_method: ContactMethod
    response_type: ResponseType
    notes: Optional[str] = None
    converted_to_client: bool = False
    converted_client_id: Optional[int] = None


class ContactUpdate(PatchModel):
    required_fields = (
        "contact_name",
        "phone_email",
        "contacted_date",
        "contact_method",
        "response_type",
        "converted_to_client",
    )

    contact_name: Optional[str] = Field(None, min_length=1)
    phone_email: Optional[str] = None
    contacted_date: Optional[date] = None
    contact_method: Optional[ContactMethod] = None
    response_type: Optional[ResponseType] = None
    notes: Optional[str] = None
    converted_to_client: Optional[bool] = None
    converted_client_id: Optional[int] = None


class ContactRead(ContactCreate):
    id: int


class ContactConvert(ApiModel):
    """Body of ``POST /contacts/{id}/convert``."""

    client_id: int = Field(..., gt=0, description="Client the contact turned into")
