# app/domains/transactions/models.py

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

CENTS = Decimal("0.01")


def to_major_units(value: int) -> Decimal:
    """Convert an integer amount in minor units (kopiyky) to hryvnias."""
    return (Decimal(value) / 100).quantize(CENTS)


class Transaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    time: int
    description: str
    mcc: int
    original_mcc: Optional[int] = Field(default=None, alias="originalMcc")
    hold: bool
    amount: int
    operation_amount: int = Field(alias="operationAmount")
    currency_code: int = Field(alias="currencyCode")
    commission_rate: int = Field(alias="commissionRate")
    cashback_amount: int = Field(alias="cashbackAmount")
    balance: int
    comment: Optional[str] = None
    receipt_id: Optional[str] = Field(default=None, alias="receiptId")
    invoice_id: Optional[str] = Field(default=None, alias="invoiceId")
    counter_edrpou: Optional[str] = Field(default=None, alias="counterEdrpou")
    counter_iban: Optional[str] = Field(default=None, alias="counterIban")
    counter_name: Optional[str] = Field(default=None, alias="counterName")

    @property
    def amount_major(self) -> Decimal:
        return to_major_units(self.amount)

    @property
    def balance_major(self) -> Decimal:
        return to_major_units(self.balance)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def current_balance(transactions: List[Transaction]) -> Decimal:
    """Balance after the newest transaction, which Monobank lists first."""
    if not transactions:
        return Decimal("0.00")
    return transactions[0].balance_major
