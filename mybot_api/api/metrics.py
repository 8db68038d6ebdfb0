"""Call metrics API endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mybot_api import queries
from mybot_api.api.deps import require_identifier
from mybot_api.database import get_db
from mybot_api.schemas.call import CallListResponse, MetricsOverviewResponse
from mybot_api.validation import CALLS_LIMIT, clamp_limit

router = APIRouter()


@router.get("/overview", response_model=MetricsOverviewResponse)
async def metrics_overview(
    restaurant_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """Basic KPIs for the dashboard"""
    restaurant_uuid = require_identifier(restaurant_id, "restaurant_id")

    result = await db.execute(queries.metrics_overview(restaurant_uuid))
    row = result.mappings().one()

    return {
        "total_calls": row["total_calls"] or 0,
        "calls_with_reservation": row["calls_with_reservation"] or 0,
        "avg_duration_seconds": float(row["avg_duration_seconds"] or 0),
        "active_calls": row["active_calls"] or 0,
    }


@router.get("/calls", response_model=CallListResponse)
async def list_calls(
    restaurant_id: Optional[str] = None,
    limit: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """Call history for a restaurant, most recent first"""
    restaurant_uuid = require_identifier(restaurant_id, "restaurant_id")

    result = await db.execute(
        queries.list_calls(restaurant_uuid, clamp_limit(limit, *CALLS_LIMIT))
    )
    return {"rows": [dict(row) for row in result.mappings()]}
