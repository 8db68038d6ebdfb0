"""
SQL statements for the API operations

Each builder takes already-validated input and returns a SQLAlchemy Core
statement. Values are always bound parameters, never interpolated.
"""

from typing import Any, Dict
from uuid import UUID

from sqlalchemy import Float, cast, func, select, update
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement

from mybot_api.models.call import Call
from mybot_api.models.restaurant import Restaurant

restaurants = Restaurant.__table__
calls = Call.__table__

RESTAURANT_SUMMARY_COLUMNS = (
    restaurants.c.id,
    restaurants.c.name,
    restaurants.c.timezone,
    restaurants.c.language_default,
    restaurants.c.public_phone,
    restaurants.c.provider,
    restaurants.c.created_at,
    restaurants.c.updated_at,
)

RESTAURANT_COLUMNS = RESTAURANT_SUMMARY_COLUMNS + (restaurants.c.provider_config,)

CALL_COLUMNS = (
    calls.c.id,
    calls.c.restaurant_id,
    calls.c.started_at,
    calls.c.ended_at,
    calls.c.from_phone_e164,
    calls.c.to_phone_e164,
    calls.c.language_detected,
    calls.c.flow,
    calls.c.outcome,
    calls.c.reservation_id,
    calls.c["metadata"],
)

# Fields the admin panel may change; id and timestamps are never writable
PATCHABLE_FIELDS = (
    "name",
    "timezone",
    "language_default",
    "public_phone",
    "provider",
    "provider_config",
)


class epoch_seconds_between(FunctionElement):
    """Seconds elapsed from the first timestamp to the second"""
    type = Float()
    name = "epoch_seconds_between"
    inherit_cache = True


@compiles(epoch_seconds_between)
def _epoch_seconds_default(element, compiler, **kw):
    start, end = list(element.clauses)
    return "EXTRACT(EPOCH FROM (%s - %s))" % (
        compiler.process(end, **kw),
        compiler.process(start, **kw),
    )


@compiles(epoch_seconds_between, "sqlite")
def _epoch_seconds_sqlite(element, compiler, **kw):
    start, end = list(element.clauses)
    return "((julianday(%s) - julianday(%s)) * 86400.0)" % (
        compiler.process(end, **kw),
        compiler.process(start, **kw),
    )


def list_restaurants(limit: int):
    return (
        select(*RESTAURANT_SUMMARY_COLUMNS)
        .order_by(restaurants.c.created_at.desc())
        .limit(limit)
    )


def get_restaurant(restaurant_id: UUID):
    return select(*RESTAURANT_COLUMNS).where(restaurants.c.id == restaurant_id)


def patch_values(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Column values for a coalescing update.

    Absent and null fields keep their stored value, so they are left out of
    the SET clause entirely. updated_at always moves to the server clock.
    """
    values = {
        name: value
        for name, value in fields.items()
        if name in PATCHABLE_FIELDS and value is not None
    }
    values["updated_at"] = func.now()
    return values


def patch_restaurant(restaurant_id: UUID, fields: Dict[str, Any]):
    return (
        update(restaurants)
        .where(restaurants.c.id == restaurant_id)
        .values(**patch_values(fields))
        .returning(*RESTAURANT_COLUMNS)
    )


def metrics_overview(restaurant_id: UUID):
    """Call KPIs for one restaurant; an empty match yields zeros, not NULLs"""
    duration = epoch_seconds_between(calls.c.started_at, calls.c.ended_at)
    return (
        select(
            func.count().label("total_calls"),
            func.count()
            .filter(calls.c.reservation_id.isnot(None))
            .label("calls_with_reservation"),
            cast(
                func.coalesce(func.avg(duration).filter(calls.c.ended_at.isnot(None)), 0),
                Float,
            ).label("avg_duration_seconds"),
            func.count()
            .filter(calls.c.ended_at.is_(None))
            .label("active_calls"),
        )
        .select_from(calls)
        .where(calls.c.restaurant_id == restaurant_id)
    )


def list_calls(restaurant_id: UUID, limit: int):
    return (
        select(*CALL_COLUMNS)
        .where(calls.c.restaurant_id == restaurant_id)
        .order_by(calls.c.started_at.desc())
        .limit(limit)
    )
