"""Restaurant settings API endpoints"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mybot_api import queries
from mybot_api.api.deps import require_identifier
from mybot_api.database import get_db
from mybot_api.errors import NotFoundError
from mybot_api.schemas.restaurant import (
    RestaurantListResponse,
    RestaurantResponse,
    RestaurantUpdate,
)
from mybot_api.validation import LIST_LIMIT, clamp_limit

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=RestaurantListResponse)
async def list_restaurants(
    limit: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """List restaurants, newest first"""
    result = await db.execute(queries.list_restaurants(clamp_limit(limit, *LIST_LIMIT)))
    return {"rows": [dict(row) for row in result.mappings()]}


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(
    restaurant_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get one restaurant"""
    restaurant_uuid = require_identifier(restaurant_id, "id")

    result = await db.execute(queries.get_restaurant(restaurant_uuid))
    row = result.mappings().first()

    if row is None:
        raise NotFoundError("restaurant_not_found")

    return dict(row)


@router.patch("/{restaurant_id}", response_model=RestaurantResponse)
async def update_restaurant(
    restaurant_id: str,
    restaurant_data: Optional[RestaurantUpdate] = None,
    db: AsyncSession = Depends(get_db),
):
    """Update restaurant settings from the admin panel.

    Only fields present in the body change; updated_at is always refreshed.
    """
    restaurant_uuid = require_identifier(restaurant_id, "id")
    fields = restaurant_data.model_dump(exclude_unset=True) if restaurant_data else {}

    result = await db.execute(queries.patch_restaurant(restaurant_uuid, fields))
    row = result.mappings().first()

    if row is None:
        logger.info("restaurant_not_found", restaurant_id=str(restaurant_uuid))
        raise NotFoundError("restaurant_not_found")

    updated = dict(row)
    await db.commit()

    logger.info(
        "restaurant_updated",
        restaurant_id=str(restaurant_uuid),
        fields=sorted(name for name, value in fields.items() if value is not None),
    )
    return updated
