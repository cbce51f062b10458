"""APScheduler cron job pruning stored results past their retention window."""

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger

from xoso_checker.config import settings
from xoso_checker.db.engine import async_session_factory

_scheduler: AsyncIOScheduler | None = None


async def _cleanup_job():
    from xoso_checker.services.lottery_service import cleanup_old_results

    async with async_session_factory() as session:
        try:
            await cleanup_old_results(session, settings.RESULT_RETENTION_DAYS)
            await session.commit()
        except Exception as e:
            logger.error("Scheduled cleanup failed: {}", e)
            await session.rollback()


def start_scheduler():
    """Start the scheduler with the daily cleanup job."""
    global _scheduler
    if _scheduler is not None:
        return

    _scheduler = AsyncIOScheduler(timezone="Asia/Ho_Chi_Minh")

    # Daily at 03:00, well after the 16:15 southern draws
    _scheduler.add_job(
        _cleanup_job, "cron",
        hour=3, minute=0,
        id="results_cleanup",
    )

    _scheduler.start()
    logger.info("Scheduler started with {} jobs", len(_scheduler.get_jobs()))


def stop_scheduler():
    """Shutdown the scheduler."""
    global _scheduler
    if _scheduler:
        _scheduler.shutdown(wait=False)
        _scheduler = None
        logger.info("Scheduler stopped")


def get_scheduler_status() -> list[dict]:
    """Get status of all scheduled jobs."""
    if not _scheduler:
        return []

    jobs = []
    for job in _scheduler.get_jobs():
        jobs.append({
            "id": job.id,
            "name": job.name,
            "next_run": str(job.next_run_time) if job.next_run_time else None,
            "trigger": str(job.trigger),
        })
    return jobs
