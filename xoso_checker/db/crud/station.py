"""CRUD operations for stations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from xoso_checker.db.models.station import Station


async def get_active_stations(session: AsyncSession, day: int | None = None) -> list[Station]:
    query = select(Station).where(Station.is_active == True).order_by(Station.name)  # noqa: E712
    if day is not None:
        query = query.where(Station.draw_day == day)
    result = await session.execute(query)
    return list(result.scalars().all())
