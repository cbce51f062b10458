"""Maintenance endpoints: result cleanup and scrape monitoring."""

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from xoso_checker.api.deps import get_db
from xoso_checker.config import settings
from xoso_checker.db.crud import scrape_log as log_crud
from xoso_checker.schemas.lottery import CleanupResponse, ScrapeLogSchema
from xoso_checker.scraper.scheduler import get_scheduler_status
from xoso_checker.services.lottery_service import cleanup_old_results

router = APIRouter()


def verify_cron_secret(authorization: str | None = Header(None)):
    if settings.CRON_SECRET and authorization != f"Bearer {settings.CRON_SECRET}":
        raise HTTPException(status_code=401, detail="Unauthorized")


@router.get("/cleanup", response_model=CleanupResponse, dependencies=[Depends(verify_cron_secret)])
async def cleanup_endpoint(db: AsyncSession = Depends(get_db)):
    """Xoá kết quả cũ hơn RESULT_RETENTION_DAYS ngày."""
    deleted, cutoff = await cleanup_old_results(db, settings.RESULT_RETENTION_DAYS)
    return CleanupResponse(
        success=True,
        message=f"Cleanup completed. {deleted} records deleted.",
        cutoff_date=cutoff,
    )


@router.get("/status")
async def scheduler_status():
    """Trạng thái lịch chạy."""
    return {"scheduler_jobs": get_scheduler_status()}


@router.get("/scrape-logs", response_model=list[ScrapeLogSchema])
async def scrape_logs(
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """Các lần cào kết quả gần nhất."""
    return await log_crud.get_recent(db, limit)
