"""Pytest configuration and fixtures."""

import threading

import pytest

from app.domains.transactions.exceptions import UpstreamError
from app.domains.transactions.models import Transaction
from app.domains.transactions.services import TransactionService

NOW = 1_700_000_000.0


def make_raw_transaction(txn_id: str = "tx-1", amount: int = -15050, balance: int = 500000) -> dict:
    return {
        "id": txn_id,
        "time": 1699990000,
        "description": "Сільпо",
        "mcc": 5411,
        "originalMcc": 5411,
        "hold": False,
        "amount": amount,
        "operationAmount": amount,
        "currencyCode": 980,
        "commissionRate": 0,
        "cashbackAmount": 150,
        "balance": balance,
        "comment": "groceries",
        "receiptId": "XXXX-XXXX-XXXX-XXXX",
    }


class FakeClock:
    def __init__(self, now: float = NOW):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeMonobank:
    """Stands in for MonobankAPI; records every statement request."""

    def __init__(self, token="test-token", account="0"):
        self.token = token
        self.account = account
        self.calls = []
        self.responses = []
        self.release = None

    def queue(self, *responses) -> None:
        self.responses.extend(responses)

    def get_statement(self, date_from: int, date_to: int):
        self.calls.append((date_from, date_to))
        if self.release is not None:
            self.release.wait(timeout=5)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def monobank() -> FakeMonobank:
    return FakeMonobank()


@pytest.fixture
def statement() -> list:
    return [
        Transaction.model_validate(make_raw_transaction("tx-2", amount=-15050, balance=500000)),
        Transaction.model_validate(make_raw_transaction("tx-1", amount=100000, balance=515050)),
    ]


@pytest.fixture
def upstream_error() -> UpstreamError:
    return UpstreamError("Monobank API error: Too Many Requests", status_code=429)


@pytest.fixture
def service(monobank, clock) -> TransactionService:
    return TransactionService(monobank, clock=clock)


@pytest.fixture
def release() -> threading.Event:
    """Event that holds FakeMonobank inside get_statement until set."""
    return threading.Event()
