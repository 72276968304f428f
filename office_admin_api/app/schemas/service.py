"""
Pydantic models for the service catalog and client subscriptions.

A service is a recurring offering (window cleaning, maintenance...)
with a billing frequency and a base price, independent of projects.
Clients are linked to the services they receive through
``ClientServiceRead`` association records.
"""

from typing import Optional

from pydantic import Field

from .common import ApiModel, PatchModel, ServiceFrequency


class ServiceCreate(ApiModel):
    """Schema for adding a service to the catalog."""

    name: str = Field(..., min_length=1, examples=["Window cleaning"])
    description: Optional[str] = None
    frequency: ServiceFrequency = Field(..., examples=["Monthly"])
    base_price: float = Field(..., ge=0, examples=[120.0])


class ServiceUpdate(PatchModel):
    required_fields = ("name", "frequency", "base_price")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    frequency: Optional[ServiceFrequency] = None
    base_price: Optional[float] = Field(None, ge=0)


class ServiceRead(ServiceCreate):
    id: int


class ClientServiceRead(ApiModel):
    """A client-service link, identified by its two ids."""

    client_id: int
    service_id: int
