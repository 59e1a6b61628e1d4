import math
from typing import List, Optional
from app.domains.transactions.models import Transaction


class StatementCache:
    def __init__(self):
        """
        Single-slot, in-memory cache of the last successful statement.

        Lives as long as the owning service; nothing survives a restart.
        """
        self.payload: Optional[List[Transaction]] = None
        self.captured_at: Optional[float] = None
        self.last_attempt_at: Optional[float] = None

    @property
    def has_data(self) -> bool:
        return self.payload is not None

    @property
    def last_updated_ms(self) -> Optional[int]:
        if self.captured_at is None:
            return None
        return int(self.captured_at * 1000)

    def seconds_since_attempt(self, now: float) -> float:
        if self.last_attempt_at is None:
            return math.inf
        return now - self.last_attempt_at

    def store(self, payload: List[Transaction], now: float) -> None:
        # Timestamps never move backwards, even if the clock does.
        if self.last_attempt_at is not None:
            now = max(now, self.last_attempt_at)
        self.payload = payload
        self.captured_at = now
        self.last_attempt_at = now
