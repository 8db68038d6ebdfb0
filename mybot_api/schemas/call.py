"""Call schemas"""

from datetime import datetime
from typing import Optional, List, Any
from uuid import UUID
from pydantic import BaseModel


class CallResponse(BaseModel):
    """Call row"""
    id: UUID
    restaurant_id: UUID
    started_at: Optional[datetime]
    ended_at: Optional[datetime]
    from_phone_e164: Optional[str]
    to_phone_e164: Optional[str]
    language_detected: Optional[str]
    flow: Optional[str]
    outcome: Optional[str]
    reservation_id: Optional[UUID]
    metadata: Optional[Any] = None

    class Config:
        from_attributes = True


class CallListResponse(BaseModel):
    rows: List[CallResponse]


class MetricsOverviewResponse(BaseModel):
    """Dashboard KPIs for one restaurant"""
    total_calls: int = 0
    calls_with_reservation: int = 0
    avg_duration_seconds: float = 0
    active_calls: int = 0
