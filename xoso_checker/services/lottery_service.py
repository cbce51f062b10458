"""Lottery service — ticket checks, station listing and result retention."""

import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from xoso_checker.core.stations import StationInfo, stations_for_day
from xoso_checker.db.crud import lottery_result as result_crud
from xoso_checker.db.crud import scrape_log as log_crud
from xoso_checker.db.crud import station as station_crud
from xoso_checker.schemas.lottery import CheckResponse, PrizeRecord, StationSchema
from xoso_checker.scraper import orchestrator
from xoso_checker.scraper.errors import ScrapeFailed, ScrapeTimeout
from xoso_checker.services import matcher
from xoso_checker.services.errors import InvalidInput, NoResults, ScrapeUnavailable

VIETNAM_TZ = ZoneInfo("Asia/Ho_Chi_Minh")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_NON_DIGITS = re.compile(r"\D")


def vietnam_today() -> date:
    return datetime.now(VIETNAM_TZ).date()


def clean_ticket(ticket_number: str) -> str:
    return _NON_DIGITS.sub("", ticket_number or "")


def parse_check_date(draw_date: str) -> date:
    if not _ISO_DATE.match(draw_date or ""):
        raise InvalidInput("Định dạng ngày không hợp lệ")
    try:
        return date.fromisoformat(draw_date)
    except ValueError as e:
        raise InvalidInput("Định dạng ngày không hợp lệ") from e


async def _load_stored(
    session: AsyncSession, station_code: str, draw_date: date
) -> list[PrizeRecord]:
    try:
        rows = await result_crud.get_results(session, station_code, draw_date)
    except SQLAlchemyError as e:
        logger.warning("Result lookup failed for {} {}: {}", station_code, draw_date, e)
        await session.rollback()
        return []
    return [PrizeRecord.model_validate(row) for row in rows]


async def _store(session: AsyncSession, records: list[PrizeRecord]) -> None:
    try:
        inserted = await result_crud.bulk_upsert(session, records)
        logger.info("Stored {} of {} scraped records", inserted, len(records))
    except SQLAlchemyError as e:
        # scraped records are still usable for this request
        logger.error("Upsert failed: {}", e)
        await session.rollback()


async def _record_scrape(session: AsyncSession, **log) -> None:
    log.setdefault("finished_at", datetime.now())
    try:
        await log_crud.create(session, log)
    except SQLAlchemyError as e:
        logger.warning("Could not write scrape log: {}", e)
        await session.rollback()


async def fetch_results(
    session: AsyncSession, station_code: str, draw_date: date
) -> list[PrizeRecord]:
    """Stored results for a station/date, scraping and storing them on a miss."""
    records = await _load_stored(session, station_code, draw_date)
    if records:
        return records

    started_at = datetime.now()
    try:
        scraped = await orchestrator.acquire(station_code, draw_date)
    except ScrapeTimeout as e:
        await _record_scrape(
            session, station_code=station_code, draw_date=draw_date,
            status="timeout", error_message=str(e)[:1000], started_at=started_at,
        )
        raise ScrapeUnavailable(
            "Không thể lấy kết quả. Vui lòng thử lại sau.", code=ScrapeTimeout.code
        ) from e
    except ScrapeFailed as e:
        await _record_scrape(
            session, station_code=station_code, draw_date=draw_date,
            status="failed", error_message=str(e)[:1000], started_at=started_at,
        )
        raise ScrapeUnavailable(
            "Không tìm thấy kết quả cho đài này", code=ScrapeFailed.code
        ) from e

    records = list(scraped.records)
    await _store(session, records)
    await _record_scrape(
        session, station_code=station_code, draw_date=draw_date, status="success",
        source=scraped.source, records_found=len(records), started_at=started_at,
    )
    return records


async def check_ticket(
    session: AsyncSession, ticket_number: str, station_code: str, draw_date: str
) -> CheckResponse:
    """Validate a check request, obtain results and match the ticket."""
    if not ticket_number or not station_code or not draw_date:
        raise InvalidInput("Vui lòng nhập đầy đủ thông tin")

    ticket = clean_ticket(ticket_number)
    if len(ticket) != matcher.TICKET_LENGTH:
        raise InvalidInput("Số vé phải có đúng 6 chữ số")

    target_date = parse_check_date(draw_date)
    if target_date > vietnam_today():
        raise NoResults("Chưa có kết quả cho ngày này", status_code=400)

    records = await fetch_results(session, station_code, target_date)
    if not records:
        raise NoResults("Không có kết quả xổ số cho ngày này")

    matches, total = matcher.match(ticket, records)
    logger.info(
        "Checked {} for {} {}: {} matches, total {}",
        ticket, station_code, target_date, len(matches), total,
    )

    if matches:
        message = (
            f"Chúc mừng! Bạn trúng {len(matches)} giải! "
            f"Tổng thưởng: {matcher.format_prize_amount(total)}"
        )
    else:
        message = "Chúc bạn may mắn lần sau!"

    return CheckResponse(
        success=True,
        matches=matches,
        all_results=records,
        total_win_amount=total,
        message=message,
    )


def _builtin_stations(day: int | None) -> list[StationSchema]:
    def to_schema(s: StationInfo) -> StationSchema:
        return StationSchema(
            code=s.code, name=s.name, short_name=s.name, draw_day=s.draw_day, region=s.region,
        )

    return [to_schema(s) for s in stations_for_day(day)]


async def list_stations(session: AsyncSession, day: int | None = None) -> list[StationSchema]:
    """Active stations (optionally for one weekday), falling back to the built-in table."""
    try:
        stations = await station_crud.get_active_stations(session, day)
    except SQLAlchemyError as e:
        logger.warning("Station lookup failed, using built-in table: {}", e)
        await session.rollback()
        return _builtin_stations(day)

    if not stations:
        return _builtin_stations(day)
    return [StationSchema.model_validate(s) for s in stations]


async def cleanup_old_results(
    session: AsyncSession, retention_days: int
) -> tuple[int, date]:
    """Delete results older than ``retention_days``. Returns (deleted, cutoff)."""
    cutoff = vietnam_today() - timedelta(days=retention_days)
    deleted = await result_crud.delete_before(session, cutoff)
    logger.info("Deleted {} results drawn before {}", deleted, cutoff)
    return deleted, cutoff
