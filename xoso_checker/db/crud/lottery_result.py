"""CRUD operations for scraped lottery results."""

from datetime import date

from sqlalchemy import case, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from xoso_checker.core.prizes import PRIZE_CONFIGS
from xoso_checker.db.models.lottery_result import LotteryResult
from xoso_checker.schemas.lottery import PrizeRecord

# special first ... eighth last
_TIER_RANK = case(
    {c.type.value: i for i, c in enumerate(PRIZE_CONFIGS)},
    value=LotteryResult.prize_type,
    else_=len(PRIZE_CONFIGS),
)


async def get_results(
    session: AsyncSession, station_code: str, draw_date: date
) -> list[LotteryResult]:
    result = await session.execute(
        select(LotteryResult)
        .where(
            LotteryResult.station_code == station_code,
            LotteryResult.draw_date == draw_date,
        )
        .order_by(_TIER_RANK, LotteryResult.prize_order)
    )
    return list(result.scalars().all())


async def upsert(session: AsyncSession, record: PrizeRecord) -> bool:
    """Insert or ignore a prize value. Returns True if inserted."""
    stmt = insert(LotteryResult).values(
        station_code=record.station_code,
        draw_date=record.draw_date,
        prize_type=record.prize_type.value,
        prize_order=record.prize_order,
        prize_value=record.prize_value,
    )
    stmt = stmt.on_conflict_do_nothing(
        index_elements=["station_code", "draw_date", "prize_type", "prize_order"]
    )
    result = await session.execute(stmt)
    return result.rowcount > 0


async def bulk_upsert(session: AsyncSession, records: list[PrizeRecord]) -> int:
    """Insert records, skip ones already stored. Returns number inserted."""
    if not records:
        return 0
    inserted = 0
    for record in records:
        if await upsert(session, record):
            inserted += 1
    return inserted


async def delete_before(session: AsyncSession, cutoff: date) -> int:
    """Delete results drawn strictly before ``cutoff``. Returns rows deleted."""
    result = await session.execute(
        delete(LotteryResult).where(LotteryResult.draw_date < cutoff)
    )
    return result.rowcount or 0
