from typing import Optional


class MonobankError(Exception):
    """Base class for every failure the transactions domain reports."""


class ConfigurationError(MonobankError):
    """Token or account is missing from the process configuration."""


class UpstreamError(MonobankError):
    """Monobank answered with a non-2xx status, or the call never completed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NoDataAvailable(MonobankError):
    """Nothing can be served: no fresh data and an empty cache."""


class RateLimited(NoDataAvailable):
    def __init__(self, retry_after: int):
        super().__init__("Rate limit exceeded")
        self.retry_after = retry_after
