"""Pydantic schemas for lottery results and ticket checks."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from xoso_checker.core.prizes import PrizeType


# --- Scraped / stored results ---

class PrizeRecord(BaseModel):
    """One drawn value of one prize tier for a station and date."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    station_code: str
    draw_date: date
    prize_type: PrizeType
    prize_order: int = Field(ge=0)
    prize_value: str = Field(pattern=r"^\d{2,6}$")


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    prize_type: str
    prize_name: str
    prize_value: str
    prize_amount: int


# --- Stations ---

class StationSchema(BaseModel):
    model_config = {"from_attributes": True}

    code: str
    name: str
    short_name: str
    draw_day: int
    region: str
    is_active: bool = True


# --- Check API ---

class CheckRequest(BaseModel):
    ticket_number: str = ""
    station_code: str = ""
    draw_date: str = ""  # YYYY-MM-DD


class CheckResponse(BaseModel):
    success: bool
    matches: list[MatchResult] = []
    all_results: list[PrizeRecord] = []
    total_win_amount: int = 0
    error_code: str | None = None
    message: str | None = None


# --- Maintenance ---

class CleanupResponse(BaseModel):
    success: bool
    message: str
    cutoff_date: date


class ScrapeLogSchema(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    station_code: str
    draw_date: date
    status: str
    source: str | None
    records_found: int
    error_message: str | None
    started_at: datetime
    finished_at: datetime | None
