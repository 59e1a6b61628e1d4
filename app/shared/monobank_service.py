import requests
import logging
from typing import List, Optional
from app.domains.transactions.exceptions import UpstreamError
from app.domains.transactions.models import Transaction

logger = logging.getLogger(__name__)


class MonobankAPI:
    def __init__(self, api_url, token, account, timeout: Optional[float] = None):
        """Client for the Monobank personal statement endpoint"""
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.account = account
        self.timeout = timeout

    def get_statement(self, date_from: int, date_to: int) -> List[Transaction]:
        """
        Fetch the account statement between two Unix timestamps (seconds).

        Exactly one request is made; there is no retry.

        Raises:
            UpstreamError: non-2xx status, transport failure or unreadable body.
        """
        url = f"{self.api_url}/{self.account}/{date_from}/{date_to}"
        headers = {"X-Token": self.token}

        logger.info(f"Requesting Monobank statement from {date_from} to {date_to}")
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Monobank request failed: {e}")
            raise UpstreamError("Failed to fetch new transactions") from e

        if not response.ok:
            logger.error(f"Monobank responded with {response.status_code} {response.reason}")
            raise UpstreamError(
                f"Monobank API error: {response.reason}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
            if not isinstance(payload, list):
                raise TypeError(f"expected a list, got {type(payload).__name__}")
            return [Transaction.model_validate(item) for item in payload]
        except (ValueError, TypeError) as e:
            logger.error(f"Invalid statement payload from Monobank: {e}")
            raise UpstreamError("Invalid statement payload from Monobank") from e
