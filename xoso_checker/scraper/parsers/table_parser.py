"""Row parser shared by the result-page strategies.

A prize table has one row per tier: the first cell holds the label
("Giải Tám", "G.7", "ĐB", ...) and the remaining cells hold the drawn
numbers, sometimes several per cell.
"""

import re
from datetime import date

from bs4 import Tag
from loguru import logger

from xoso_checker.core.prizes import PrizeType, classify_label
from xoso_checker.schemas.lottery import PrizeRecord

_SEPARATORS = re.compile(r"[\s\-.]+")
_NON_DIGITS = re.compile(r"\D")

MIN_VALUE_DIGITS = 2
MAX_VALUE_DIGITS = 6


def split_values(text: str) -> list[str]:
    """Pull prize numbers out of a cell, dropping 0-1 digit noise."""
    values = []
    for token in _SEPARATORS.split(text or ""):
        digits = _NON_DIGITS.sub("", token)
        if len(digits) >= MIN_VALUE_DIGITS:
            values.append(digits)
    return values


def parse_prize_table(table: Tag, station_code: str, draw_date: date) -> list[PrizeRecord]:
    records: list[PrizeRecord] = []
    # ranks run across rows: a tier may be split over several rows
    orders: dict[PrizeType, int] = {}

    for row in table.find_all("tr"):
        cells = row.find_all(["td", "th"], recursive=False)
        if len(cells) < 2:
            continue

        prize_type = classify_label(cells[0].get_text(" ", strip=True))
        if prize_type is None:
            continue

        for cell in cells[1:]:
            for value in split_values(cell.get_text(" ", strip=True)):
                if len(value) > MAX_VALUE_DIGITS:
                    logger.debug("Skipping oversized {} value {!r}", prize_type.value, value)
                    continue
                order = orders.get(prize_type, 0)
                orders[prize_type] = order + 1
                records.append(
                    PrizeRecord(
                        station_code=station_code,
                        draw_date=draw_date,
                        prize_type=prize_type,
                        prize_order=order,
                        prize_value=value,
                    )
                )

    return records
