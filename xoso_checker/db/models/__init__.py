"""ORM models package."""

from xoso_checker.db.models.lottery_result import LotteryResult
from xoso_checker.db.models.scrape_log import ScrapeLog
from xoso_checker.db.models.station import Station

__all__ = [
    "LotteryResult",
    "ScrapeLog",
    "Station",
]
