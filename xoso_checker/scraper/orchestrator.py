"""Primary/fallback result acquisition under an overall deadline.

Sources are tried strictly one after another; the fallback is only
contacted when the primary fails or has no table for the station. The
whole sequence runs as one task that is cancelled when the deadline
expires, which closes any in-flight HTTP connection.
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from datetime import date

from loguru import logger

from xoso_checker.config import settings
from xoso_checker.scraper import fetcher
from xoso_checker.scraper.errors import ScrapeFailed, ScrapeTimeout
from xoso_checker.scraper.sources import DEFAULT_SOURCES, ResultSource
from xoso_checker.schemas.lottery import PrizeRecord

Fetch = Callable[[str], Awaitable[str]]


@dataclass(frozen=True)
class ScrapeResult:
    source: str
    records: tuple[PrizeRecord, ...]


def parse_draw_date(draw_date: date | str) -> date:
    if isinstance(draw_date, date):
        return draw_date
    return date.fromisoformat(draw_date)


async def _try_source(
    source: ResultSource, fetch: Fetch, station_code: str, draw_date: date
) -> list[PrizeRecord]:
    url = source.build_url(draw_date)
    markup = await fetch(url)
    return source.extract(markup, station_code, draw_date)


async def _scrape_sources(
    sources: Sequence[ResultSource], fetch: Fetch, station_code: str, draw_date: date
) -> ScrapeResult:
    for source in sources:
        try:
            records = await _try_source(source, fetch, station_code, draw_date)
        except Exception as e:
            logger.warning("[{}] {} {} failed: {}", source.name, station_code, draw_date, e)
            continue

        if records:
            logger.info(
                "[{}] {} {}: {} records", source.name, station_code, draw_date, len(records)
            )
            return ScrapeResult(source=source.name, records=tuple(records))

        logger.warning("[{}] No table for {} on {}", source.name, station_code, draw_date)

    raise ScrapeFailed(f"No results for {station_code} on {draw_date}")


async def acquire(
    station_code: str,
    draw_date: date | str,
    *,
    sources: Sequence[ResultSource] = DEFAULT_SOURCES,
    deadline: float | None = None,
    fetch: Fetch | None = None,
) -> ScrapeResult:
    """Scrape results for one station/date, reporting which source answered.

    Raises ScrapeFailed when every source is exhausted and ScrapeTimeout
    when ``deadline`` seconds pass first.
    """
    target_date = parse_draw_date(draw_date)
    timeout = deadline if deadline is not None else settings.SCRAPE_TIMEOUT_SECONDS

    try:
        return await asyncio.wait_for(
            _scrape_sources(sources, fetch or fetcher.fetch, station_code, target_date),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        logger.error("Scrape for {} {} exceeded {}s", station_code, target_date, timeout)
        raise ScrapeTimeout(
            f"Scrape for {station_code} on {target_date} exceeded {timeout}s"
        ) from e
    except ScrapeFailed:
        logger.error("All sources failed for {} {}", station_code, target_date)
        raise


async def acquire_results(
    station_code: str,
    draw_date: date | str,
    **kwargs,
) -> list[PrizeRecord]:
    """Prize records for a station and draw date, scraped from the web."""
    result = await acquire(station_code, draw_date, **kwargs)
    return list(result.records)
