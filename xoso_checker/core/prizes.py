"""Prize tiers of the southern (Miền Nam) traditional lottery.

Amounts are in VND for a 10,000đ ticket.
"""

import re
from dataclasses import dataclass
from enum import Enum

from xoso_checker.core.normalize import normalize


class PrizeType(str, Enum):
    SPECIAL = "special"
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    FIFTH = "fifth"
    SIXTH = "sixth"
    SEVENTH = "seventh"
    EIGHTH = "eighth"


@dataclass(frozen=True)
class PrizeConfig:
    type: PrizeType
    name: str
    short_name: str
    digits: int
    count: int
    prize_amount: int


@dataclass(frozen=True)
class SpecialPrize:
    """A payout derived from the special value rather than drawn directly."""

    type: str
    name: str
    prize_amount: int


PRIZE_CONFIGS: tuple[PrizeConfig, ...] = (
    PrizeConfig(PrizeType.SPECIAL, "Giải Đặc Biệt", "ĐB", 6, 1, 2_000_000_000),
    PrizeConfig(PrizeType.FIRST, "Giải Nhất", "G1", 5, 1, 30_000_000),
    PrizeConfig(PrizeType.SECOND, "Giải Nhì", "G2", 5, 1, 15_000_000),
    PrizeConfig(PrizeType.THIRD, "Giải Ba", "G3", 5, 2, 10_000_000),
    PrizeConfig(PrizeType.FOURTH, "Giải Tư", "G4", 5, 7, 3_000_000),
    PrizeConfig(PrizeType.FIFTH, "Giải Năm", "G5", 4, 1, 1_000_000),
    PrizeConfig(PrizeType.SIXTH, "Giải Sáu", "G6", 4, 3, 400_000),
    PrizeConfig(PrizeType.SEVENTH, "Giải Bảy", "G7", 3, 1, 200_000),
    PrizeConfig(PrizeType.EIGHTH, "Giải Tám", "G8", 2, 1, 100_000),
)

PRIZE_CONFIG_BY_TYPE: dict[PrizeType, PrizeConfig] = {c.type: c for c in PRIZE_CONFIGS}

SUB_SPECIAL = SpecialPrize("sub_special", "Giải Phụ Đặc Biệt", 50_000_000)
CONSOLATION = SpecialPrize("consolation", "Giải Khuyến Khích", 6_800_000)

# "Thứ Ba" ... "Thứ Bảy", "Chủ Nhật": weekday headers share the ordinal words
_WEEKDAY_LABEL = re.compile(r"\b(?:thu\s*(?:hai|ba|tu|nam|sau|bay)|chu\s*nhat)\b")


def _keywords(word: str, number: int) -> re.Pattern:
    # "giai tam", "g8", "g.8", "g 8"
    return re.compile(rf"\b(?:{word}|g\.?\s*{number})\b")


# Checked in order: a label that hits several tiers resolves to the highest one.
PRIZE_KEYWORDS: tuple[tuple[PrizeType, re.Pattern], ...] = (
    (PrizeType.SPECIAL, re.compile(r"\b(?:db|dac\s*biet)\b")),
    (PrizeType.FIRST, _keywords("nhat", 1)),
    (PrizeType.SECOND, _keywords("nhi", 2)),
    (PrizeType.THIRD, _keywords("ba", 3)),
    (PrizeType.FOURTH, _keywords("tu", 4)),
    (PrizeType.FIFTH, _keywords("nam", 5)),
    (PrizeType.SIXTH, _keywords("sau", 6)),
    (PrizeType.SEVENTH, _keywords("bay", 7)),
    (PrizeType.EIGHTH, _keywords("tam", 8)),
)


def classify_label(label: str | None) -> PrizeType | None:
    """Map a result-table row label ("Giải Đặc Biệt", "G.7", ...) to its tier."""
    text = normalize(label)
    if not text or _WEEKDAY_LABEL.search(text):
        return None
    for prize_type, pattern in PRIZE_KEYWORDS:
        if pattern.search(text):
            return prize_type
    return None


def get_prize_config(prize_type: PrizeType | str) -> PrizeConfig | None:
    try:
        return PRIZE_CONFIG_BY_TYPE[PrizeType(prize_type)]
    except ValueError:
        return None
