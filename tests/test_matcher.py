import pytest

from xoso_checker.core.prizes import CONSOLATION, SUB_SPECIAL, PrizeType, get_prize_config
from xoso_checker.services.matcher import (
    format_prize_amount,
    is_consolation,
    is_sub_special,
    is_suffix_match,
    match,
)

SPECIAL = "123456"
DERIVED = {PrizeType.SPECIAL.value, SUB_SPECIAL.type, CONSOLATION.type}


def _types(matches):
    return [m.prize_type for m in matches]


def test_no_match(make_record):
    matches, total = match("654321", [make_record(PrizeType.SPECIAL, SPECIAL)])
    assert matches == []
    assert total == 0


def test_sub_special(make_record):
    matches, total = match("923456", [make_record(PrizeType.SPECIAL, SPECIAL)])
    assert _types(matches) == [SUB_SPECIAL.type]
    assert matches[0].prize_value == SPECIAL
    assert matches[0].prize_name == "Giải Phụ Đặc Biệt"
    assert total == SUB_SPECIAL.prize_amount


def test_eighth_suffix(make_record):
    matches, total = match("123456", [make_record(PrizeType.EIGHTH, "56")])
    assert _types(matches) == ["eighth"]
    assert matches[0].prize_value == "56"
    assert total == get_prize_config(PrizeType.EIGHTH).prize_amount == 100_000


def test_special_win_excludes_derived_prizes(make_record):
    matches, total = match(SPECIAL, [make_record(PrizeType.SPECIAL, SPECIAL)])
    assert _types(matches) == ["special"]
    assert total == 2_000_000_000


def test_consolation(make_record):
    matches, total = match("123556", [make_record(PrizeType.SPECIAL, SPECIAL)])
    assert _types(matches) == [CONSOLATION.type]
    assert total == CONSOLATION.prize_amount


def test_results_sorted_by_amount_and_summed(make_record):
    records = [
        make_record(PrizeType.SPECIAL, SPECIAL),
        make_record(PrizeType.EIGHTH, "56"),
        make_record(PrizeType.SEVENTH, "456"),
        make_record(PrizeType.FIRST, "23456"),
    ]
    matches, total = match("923456", records)
    assert _types(matches) == [SUB_SPECIAL.type, "first", "seventh", "eighth"]
    assert total == 50_000_000 + 30_000_000 + 200_000 + 100_000


def test_equal_amounts_keep_record_order(make_record):
    records = [
        make_record(PrizeType.SIXTH, "3456", order=0),
        make_record(PrizeType.SIXTH, "9999", order=1),
        make_record(PrizeType.SIXTH, "3456", order=2),
        make_record(PrizeType.EIGHTH, "56"),
    ]
    matches, total = match("123456", records)
    assert _types(matches) == ["sixth", "sixth", "eighth"]
    assert total == 400_000 * 2 + 100_000


@pytest.mark.parametrize("ticket", ["12345", "1234567", "12345a", "", None])
def test_malformed_ticket_wins_nothing(make_record, ticket):
    assert match(ticket, [make_record(PrizeType.EIGHTH, "45")]) == ([], 0)


def test_no_records():
    assert match("123456", []) == ([], 0)


def test_matching_is_repeatable(make_record):
    records = [make_record(PrizeType.SPECIAL, SPECIAL), make_record(PrizeType.EIGHTH, "57")]
    assert match("123457", records) == match("123457", records)


def test_single_digit_change_in_every_position(make_record):
    records = [make_record(PrizeType.SPECIAL, SPECIAL)]
    for position in range(6):
        for digit in "0123456789":
            if digit == SPECIAL[position]:
                continue
            ticket = SPECIAL[:position] + digit + SPECIAL[position + 1:]
            derived = [t for t in _types(match(ticket, records)[0]) if t in DERIVED]
            expected = SUB_SPECIAL.type if position == 0 else CONSOLATION.type
            assert derived == [expected], ticket


def test_derived_prizes_are_mutually_exclusive(make_record):
    for special in ("123456", "000000", "907153"):
        records = [make_record(PrizeType.SPECIAL, special)]
        for n in range(0, 1_000_000, 9973):
            ticket = f"{n:06d}"
            derived = [t for t in _types(match(ticket, records)[0]) if t in DERIVED]
            assert len(derived) <= 1, (special, ticket)


def test_rule_helpers():
    assert is_suffix_match("123456", "456")
    assert not is_suffix_match("123456", "1234567")
    assert not is_suffix_match("123456", "")
    assert is_sub_special("023456", SPECIAL)
    assert not is_sub_special(SPECIAL, SPECIAL)
    assert not is_consolation("023456", SPECIAL)
    assert not is_consolation("123466", "12346")
    assert not is_consolation("120056", SPECIAL)


def test_format_prize_amount():
    assert format_prize_amount(2_000_000_000) == "2 tỷ"
    assert format_prize_amount(30_000_000) == "30 triệu"
    assert format_prize_amount(400_000) == "400.000đ"
