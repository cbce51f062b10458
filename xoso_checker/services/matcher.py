"""Ticket matching for the southern traditional lottery.

Besides the nine drawn tiers (won when the ticket ends with the drawn
value), two prizes are derived from the special value:

* Giải Phụ Đặc Biệt: the last five digits equal the special, the first
  digit differs.
* Giải Khuyến Khích: exactly one digit differs from the special, and that
  digit is not the first one.

A ticket wins at most one of special / sub-special / consolation.
"""

from collections.abc import Iterable

from xoso_checker.core.prizes import (
    CONSOLATION,
    SUB_SPECIAL,
    PrizeType,
    get_prize_config,
)
from xoso_checker.schemas.lottery import MatchResult, PrizeRecord

TICKET_LENGTH = 6


def is_valid_ticket(ticket: str | None) -> bool:
    return bool(ticket) and len(ticket) == TICKET_LENGTH and ticket.isdigit()


def is_suffix_match(ticket: str, prize_value: str) -> bool:
    """The ticket wins a tier when its last len(prize_value) digits match."""
    if not prize_value or len(prize_value) > len(ticket):
        return False
    return ticket[-len(prize_value):] == prize_value


def is_sub_special(ticket: str, special: str) -> bool:
    if len(ticket) != TICKET_LENGTH or len(special) != TICKET_LENGTH:
        return False
    return ticket != special and ticket[1:] == special[1:]


def is_consolation(ticket: str, special: str) -> bool:
    if len(ticket) != TICKET_LENGTH or len(special) != TICKET_LENGTH:
        return False
    mismatches = [i for i, (a, b) in enumerate(zip(ticket, special)) if a != b]
    return len(mismatches) == 1 and mismatches[0] != 0


def _special_value(records: Iterable[PrizeRecord]) -> str | None:
    for record in records:
        if record.prize_type == PrizeType.SPECIAL:
            return record.prize_value
    return None


def match(ticket: str, records: list[PrizeRecord]) -> tuple[list[MatchResult], int]:
    """Every prize ``ticket`` wins against ``records``, best first, plus the total.

    A malformed ticket is not an error: it simply wins nothing.
    """
    if not is_valid_ticket(ticket) or not records:
        return [], 0

    matches: list[MatchResult] = []
    for record in records:
        if not is_suffix_match(ticket, record.prize_value):
            continue
        config = get_prize_config(record.prize_type)
        matches.append(
            MatchResult(
                prize_type=PrizeType(record.prize_type).value,
                prize_name=config.name if config else str(record.prize_type),
                prize_value=record.prize_value,
                prize_amount=config.prize_amount if config else 0,
            )
        )

    special = _special_value(records)
    if special and len(special) == TICKET_LENGTH:
        won_special = any(m.prize_type == PrizeType.SPECIAL.value for m in matches)
        if not won_special:
            derived = None
            if is_sub_special(ticket, special):
                derived = SUB_SPECIAL
            elif is_consolation(ticket, special):
                derived = CONSOLATION
            if derived is not None:
                matches.append(
                    MatchResult(
                        prize_type=derived.type,
                        prize_name=derived.name,
                        prize_value=special,
                        prize_amount=derived.prize_amount,
                    )
                )

    # sorted() is stable: equal amounts keep discovery order
    matches = sorted(matches, key=lambda m: m.prize_amount, reverse=True)
    return matches, total_amount(matches)


def total_amount(matches: Iterable[MatchResult]) -> int:
    return sum(m.prize_amount for m in matches)


def format_prize_amount(amount: int) -> str:
    """2_000_000_000 -> "2 tỷ", 30_000_000 -> "30 triệu", 400_000 -> "400.000đ"."""
    if amount >= 1_000_000_000:
        return f"{amount / 1_000_000_000:.0f} tỷ"
    if amount >= 1_000_000:
        return f"{amount / 1_000_000:.0f} triệu"
    return f"{amount:,}đ".replace(",", ".")
