"""Scraped prize value ORM model."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from xoso_checker.db.base import Base


class LotteryResult(Base):
    """One drawn value: station + date + prize tier + position in the tier."""

    __tablename__ = "lottery_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    station_code: Mapped[str] = mapped_column(String(10), nullable=False)
    draw_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    prize_type: Mapped[str] = mapped_column(String(10), nullable=False)  # special ... eighth
    prize_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    prize_value: Mapped[str] = mapped_column(String(6), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint(
            "station_code", "draw_date", "prize_type", "prize_order",
            name="uq_lottery_results_station_date_prize",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<LotteryResult {self.station_code} {self.draw_date} "
            f"{self.prize_type}[{self.prize_order}]={self.prize_value}>"
        )
