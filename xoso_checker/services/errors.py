"""Errors raised by the ticket-check service and rendered by the API."""


class CheckError(Exception):
    code = "CHECK_ERROR"
    status_code = 400

    def __init__(self, message: str, *, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(CheckError):
    code = "INVALID_INPUT"
    status_code = 400


class NoResults(CheckError):
    code = "NO_RESULTS"
    status_code = 404


class ScrapeUnavailable(CheckError):
    """Results are not stored and could not be scraped (code is the scrape error)."""

    code = "SCRAPE_FAILED"
    status_code = 503
