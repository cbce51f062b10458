"""Parser for xoso.me southern results pages (primary source).

The page lists one ``table.kqxs`` per station drawn that day. The station
name sits in the table's ``th`` cells, in the element just before the
table, or in a ``data-station`` attribute, depending on the page revision.
"""

from datetime import date

from bs4 import BeautifulSoup, Tag

from xoso_checker.core.stations import is_station_match
from xoso_checker.scraper.parsers.table_parser import parse_prize_table

CANDIDATE_SELECTOR = "table.kqxs, .box_kqxs"


def _station_label(table: Tag) -> str:
    header = " ".join(th.get_text(" ", strip=True) for th in table.find_all("th"))
    previous = table.find_previous_sibling()
    previous_text = previous.get_text(" ", strip=True) if previous else ""
    attr = table.get("data-station") or ""
    return f"{header} {previous_text} {attr}"


def find_station_table(soup: BeautifulSoup, station_code: str) -> Tag | None:
    for table in soup.select(CANDIDATE_SELECTOR):
        if is_station_match(_station_label(table), station_code):
            return table
    return None


def extract(markup: str, station_code: str, draw_date: date):
    soup = BeautifulSoup(markup, "html.parser")
    table = find_station_table(soup, station_code)
    if table is None:
        return []
    return parse_prize_table(table, station_code, draw_date)
