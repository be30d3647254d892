"""Catalog schemas - services offered for booking"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ServiceCreate(BaseModel):
    """Schema for publishing a new service"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: float = Field(..., gt=0)


class ServiceResponse(BaseModel):
    id: str
    name: str
    description: Optional[str]
    price: float
    ownerId: str
    createdAt: Optional[datetime] = None


class ServiceEnvelope(BaseModel):
    service: ServiceResponse


class ServiceListResponse(BaseModel):
    services: list[ServiceResponse]
