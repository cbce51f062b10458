"""Manual scraper check: ``python -m xoso_checker.scraper.cli TP 2026-02-09``."""

import argparse
import asyncio
import sys

from loguru import logger

from xoso_checker.scraper.errors import ScraperError
from xoso_checker.scraper.orchestrator import acquire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape southern lottery results for one station")
    parser.add_argument("station_code", help="station code, e.g. TP or TP2")
    parser.add_argument("draw_date", help="draw date, YYYY-MM-DD")
    parser.add_argument("--deadline", type=float, default=None, help="overall timeout in seconds")
    args = parser.parse_args(argv)

    try:
        result = asyncio.run(acquire(args.station_code, args.draw_date, deadline=args.deadline))
    except (ScraperError, ValueError) as e:
        logger.error("Scrape failed: {}", e)
        return 1

    print(f"{len(result.records)} records from {result.source}")
    for record in result.records:
        print(f"{record.prize_type.value:<8} {record.prize_order:>2}  {record.prize_value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
