import asyncio
from datetime import date

from sqlalchemy.dialects import postgresql

from xoso_checker.core.prizes import PrizeType
from xoso_checker.db.crud import lottery_result as result_crud
from xoso_checker.db.crud import station as station_crud


class FakeResult:
    def __init__(self, rowcount=0, rows=()):
        self.rowcount = rowcount
        self._rows = list(rows)

    def scalars(self):
        return self

    def all(self):
        return self._rows


class RecordingSession:
    """Captures executed statements and replays canned results."""

    def __init__(self, results=()):
        self.statements = []
        self._results = list(results)

    async def execute(self, stmt):
        self.statements.append(stmt)
        return self._results.pop(0) if self._results else FakeResult()


def _compile(stmt):
    return stmt.compile(dialect=postgresql.dialect())


def test_upsert_ignores_duplicate_keys(make_record):
    session = RecordingSession([FakeResult(rowcount=1)])

    inserted = asyncio.run(result_crud.upsert(session, make_record(PrizeType.FOURTH, "12345", order=3)))

    assert inserted is True
    compiled = _compile(session.statements[0])
    assert (
        "ON CONFLICT (station_code, draw_date, prize_type, prize_order) DO NOTHING"
        in str(compiled)
    )
    assert compiled.params["prize_type"] == "fourth"
    assert compiled.params["prize_order"] == 3
    assert compiled.params["prize_value"] == "12345"


def test_bulk_upsert_counts_only_new_rows(make_record):
    records = [make_record(PrizeType.EIGHTH, "47"), make_record(PrizeType.SPECIAL, "123456")]
    session = RecordingSession([FakeResult(rowcount=1), FakeResult(rowcount=0)])

    assert asyncio.run(result_crud.bulk_upsert(session, records)) == 1
    assert len(session.statements) == 2
    assert asyncio.run(result_crud.bulk_upsert(session, [])) == 0


def test_results_ordered_by_tier_then_rank():
    session = RecordingSession([FakeResult(rows=["row"])])

    rows = asyncio.run(result_crud.get_results(session, "TP", date(2026, 2, 9)))

    assert rows == ["row"]
    compiled = _compile(session.statements[0])
    sql = " ".join(str(compiled).split())
    assert "ORDER BY CASE lottery_results.prize_type WHEN" in sql
    assert sql.endswith("END, lottery_results.prize_order")
    assert set(compiled.params.values()) >= {"TP", date(2026, 2, 9)}

    tier_rank = str(
        result_crud._TIER_RANK.compile(
            dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
        )
    )
    positions = [tier_rank.index(f"'{t.value}' THEN {i}") for i, t in enumerate(PrizeType)]
    assert positions == sorted(positions)
    assert "ELSE 9" in tier_rank


def test_delete_before_is_strict():
    session = RecordingSession([FakeResult(rowcount=7)])

    deleted = asyncio.run(result_crud.delete_before(session, date(2026, 1, 10)))

    assert deleted == 7
    compiled = _compile(session.statements[0])
    sql = " ".join(str(compiled).split())
    assert sql.startswith("DELETE FROM lottery_results WHERE lottery_results.draw_date <")
    assert "<=" not in sql
    assert list(compiled.params.values()) == [date(2026, 1, 10)]


def test_active_stations_filter_by_day():
    session = RecordingSession()

    asyncio.run(station_crud.get_active_stations(session, 3))
    asyncio.run(station_crud.get_active_stations(session))

    with_day = " ".join(str(_compile(session.statements[0])).split())
    assert "stations.is_active = true" in with_day
    assert "stations.draw_day =" in with_day
    assert with_day.endswith("ORDER BY stations.name")
    assert 3 in _compile(session.statements[0]).params.values()

    all_days = str(_compile(session.statements[1]))
    assert "draw_day =" not in all_days
