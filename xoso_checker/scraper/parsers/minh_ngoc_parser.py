"""Parser for minhngoc.net.vn southern results pages (fallback source).

Each station column is rendered as its own ``table.rightcl`` whose
province name lives in a ``.tinh`` (older pages: ``.title`` or ``th``) cell.
"""

from datetime import date

from bs4 import BeautifulSoup, Tag

from xoso_checker.core.stations import is_station_match
from xoso_checker.scraper.parsers.table_parser import parse_prize_table

CANDIDATE_SELECTOR = "table.rightcl, table.box_kqxs"
LABEL_SELECTOR = ".tinh, .title, th"


def find_station_table(soup: BeautifulSoup, station_code: str) -> Tag | None:
    for table in soup.select(CANDIDATE_SELECTOR):
        province = " ".join(el.get_text(" ", strip=True) for el in table.select(LABEL_SELECTOR))
        if is_station_match(province, station_code):
            return table
    return None


def extract(markup: str, station_code: str, draw_date: date):
    soup = BeautifulSoup(markup, "html.parser")
    table = find_station_table(soup, station_code)
    if table is None:
        return []
    return parse_prize_table(table, station_code, draw_date)
