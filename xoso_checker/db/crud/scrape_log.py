"""CRUD operations for scrape logs."""

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from xoso_checker.db.models.scrape_log import ScrapeLog


async def create(session: AsyncSession, log: dict) -> ScrapeLog:
    obj = ScrapeLog(**log)
    session.add(obj)
    await session.flush()
    return obj


async def get_recent(session: AsyncSession, limit: int = 20) -> list[ScrapeLog]:
    result = await session.execute(
        select(ScrapeLog).order_by(desc(ScrapeLog.started_at)).limit(limit)
    )
    return list(result.scalars().all())
