"""Restaurant schemas"""

from datetime import datetime
from typing import Optional, Any, List
from uuid import UUID
from pydantic import BaseModel


class RestaurantSummary(BaseModel):
    """Restaurant row as listed"""
    id: UUID
    name: Optional[str]
    timezone: Optional[str]
    language_default: Optional[str]
    public_phone: Optional[str]
    provider: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class RestaurantResponse(RestaurantSummary):
    """Full restaurant row"""
    provider_config: Optional[Any] = None


class RestaurantListResponse(BaseModel):
    rows: List[RestaurantSummary]


class RestaurantUpdate(BaseModel):
    """Partial update from the admin panel; null means keep the current value"""
    name: Optional[str] = None
    timezone: Optional[str] = None
    language_default: Optional[str] = None
    public_phone: Optional[str] = None
    provider: Optional[str] = None
    provider_config: Optional[Any] = None
