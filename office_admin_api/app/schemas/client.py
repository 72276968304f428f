"""
Pydantic models for clients.

A client is a customer receiving services and projects, either a private
individual or a company.
"""

from typing import Optional

from pydantic import Field

from .common import ApiModel, ClientType, PatchModel


class ClientCreate(ApiModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, examples=["Acme Co"])
    phone: str = Field(..., examples=["+1 555 0100"])
    address: Optional[str] = Field(None, examples=["1 Main Street"])
    client_type: ClientType = Field(..., examples=["Company"])


class ClientUpdate(PatchModel):
    """Schema for updating a client.  Only provided fields change."""

    required_fields = ("name", "phone", "client_type")

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None
    client_type: Optional[ClientType] = None


class ClientRead(ClientCreate):
    id: int
