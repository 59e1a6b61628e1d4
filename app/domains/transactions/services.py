import asyncio
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, List, Optional
from fastapi.concurrency import run_in_threadpool
from app.domains.transactions.cache import StatementCache
from app.domains.transactions.exceptions import (
    ConfigurationError,
    NoDataAvailable,
    RateLimited,
    UpstreamError,
)
from app.domains.transactions.models import Transaction
from app.shared.monobank_service import MonobankAPI

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass
class TransactionsResult:
    data: List[Transaction]
    cached: bool
    last_updated: int  # epoch millis
    error: Optional[str] = None
    retry_after: Optional[int] = None

    def to_response(self) -> dict:
        body = {
            "data": [txn.to_wire() for txn in self.data],
            "cached": self.cached,
            "lastUpdated": self.last_updated,
        }
        if self.retry_after is not None:
            body["retryAfter"] = self.retry_after
        if self.error:
            body["error"] = self.error
        return body


class TransactionService:
    def __init__(
        self,
        monobank: MonobankAPI,
        cache: Optional[StatementCache] = None,
        cooldown_seconds: int = 60,
        lookback_days: int = 30,
        clock: Callable[[], float] = time.time,
    ):
        self.monobank = monobank
        self.cache = cache if cache is not None else StatementCache()
        self.cooldown_seconds = cooldown_seconds
        self.lookback_days = lookback_days
        self.clock = clock
        self._inflight: Optional[asyncio.Task] = None

    def check_configuration(self):
        if not self.monobank.token:
            raise ConfigurationError("Monobank API token is not configured")
        if not self.monobank.account:
            raise ConfigurationError("Monobank account is not configured")

    async def get_transactions(self) -> TransactionsResult:
        """
        Serve the statement while keeping Monobank at one call per cooldown.

        Inside the cooldown window the cached statement is returned, or
        RateLimited is raised if nothing has been cached yet. Once the
        window has passed a single upstream call is made; concurrent callers
        join that call instead of starting their own.
        """
        self.check_configuration()

        if self._inflight is None:
            now = self.clock()
            elapsed = self.cache.seconds_since_attempt(now)
            if elapsed < self.cooldown_seconds:
                retry_after = math.ceil(self.cooldown_seconds - elapsed)
                if self.cache.has_data:
                    logger.info(f"Serving cached statement, next refresh in {retry_after}s")
                    return TransactionsResult(
                        data=self.cache.payload,
                        cached=True,
                        last_updated=self.cache.last_updated_ms,
                        retry_after=retry_after,
                    )
                raise RateLimited(retry_after)

            self._inflight = asyncio.ensure_future(self._refresh(now))
            self._inflight.add_done_callback(self._clear_inflight)
        else:
            logger.info("Joining in-flight Monobank request")

        return await asyncio.shield(self._inflight)

    def _clear_inflight(self, task: asyncio.Task):
        if self._inflight is task:
            self._inflight = None

    async def _refresh(self, now: float) -> TransactionsResult:
        date_to = int(now)
        date_from = date_to - self.lookback_days * SECONDS_PER_DAY

        try:
            payload = await run_in_threadpool(self.monobank.get_statement, date_from, date_to)
        except UpstreamError as e:
            if self.cache.has_data:
                logger.warning(f"Monobank refresh failed, serving cached statement: {e}")
                return TransactionsResult(
                    data=self.cache.payload,
                    cached=True,
                    last_updated=self.cache.last_updated_ms,
                    error=str(e),
                )
            logger.error(f"Monobank refresh failed with nothing cached: {e}")
            raise NoDataAvailable("Failed to fetch transactions") from e

        self.cache.store(payload, now)
        logger.info(f"Fetched {len(payload)} transactions from Monobank")
        return TransactionsResult(
            data=payload,
            cached=False,
            last_updated=self.cache.last_updated_ms,
        )
