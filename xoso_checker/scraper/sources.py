"""Result sources: a URL template paired with the parser for its markup."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from xoso_checker.config import settings
from xoso_checker.scraper.parsers import minh_ngoc_parser, xoso_me_parser
from xoso_checker.schemas.lottery import PrizeRecord

Extractor = Callable[[str, str, date], list[PrizeRecord]]


@dataclass(frozen=True)
class ResultSource:
    name: str
    url_template: str  # "{date}" is replaced by DD-MM-YYYY
    extract: Extractor

    def build_url(self, draw_date: date) -> str:
        return self.url_template.format(date=draw_date.strftime("%d-%m-%Y"))


PRIMARY_SOURCE = ResultSource("xoso.me", settings.PRIMARY_SOURCE_URL, xoso_me_parser.extract)
FALLBACK_SOURCE = ResultSource("minhngoc", settings.FALLBACK_SOURCE_URL, minh_ngoc_parser.extract)

DEFAULT_SOURCES: tuple[ResultSource, ...] = (PRIMARY_SOURCE, FALLBACK_SOURCE)
