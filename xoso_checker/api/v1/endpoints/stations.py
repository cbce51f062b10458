"""Station listing endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from xoso_checker.api.deps import get_db
from xoso_checker.schemas.lottery import StationSchema
from xoso_checker.services.lottery_service import list_stations

router = APIRouter()


@router.get("", response_model=list[StationSchema])
async def get_stations(
    day: str | None = Query(None, description="0=Chủ nhật ... 6=Thứ bảy"),
    db: AsyncSession = Depends(get_db),
):
    """Danh sách đài đang hoạt động, lọc theo thứ trong tuần."""
    day_num = None
    if day is not None:
        if not day.isdigit() or not 0 <= int(day) <= 6:
            raise HTTPException(status_code=400, detail="Invalid day parameter. Must be 0-6.")
        day_num = int(day)
    return await list_stations(db, day_num)
