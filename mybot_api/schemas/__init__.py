"""Pydantic schemas for request/response validation"""

from mybot_api.schemas.restaurant import (
    RestaurantSummary,
    RestaurantResponse,
    RestaurantListResponse,
    RestaurantUpdate,
)
from mybot_api.schemas.call import (
    CallResponse,
    CallListResponse,
    MetricsOverviewResponse,
)

__all__ = [
    "RestaurantSummary",
    "RestaurantResponse",
    "RestaurantListResponse",
    "RestaurantUpdate",
    "CallResponse",
    "CallListResponse",
    "MetricsOverviewResponse",
]
