"""Scraper exception hierarchy."""


class ScraperError(Exception):
    """Base class for result-acquisition failures."""


class FetchError(ScraperError):
    """One source could not be downloaded (HTTP status, network or timeout)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ScrapeFailed(ScraperError):
    """Every source was tried and none produced prize rows."""

    code = "SCRAPE_FAILED"


class ScrapeTimeout(ScraperError):
    """The overall scrape deadline expired."""

    code = "SCRAPE_TIMEOUT"
