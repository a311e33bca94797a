"""Domain entities: TransactionOutcome and VerifiedOutcome."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import MissingParameterError


class PaymentStatus(str, Enum):
    """Status codes MOLPay sends back with a completed transaction."""

    SUCCESS = "00"
    FAILURE = "11"
    PENDING = "22"


class TransactionOutcome(BaseModel):
    """Transaction result as received from MOLPay, untrusted until verified.

    Every field is optional at construction time. Which fields must be present
    depends on the digest stage being computed, see `require`.
    """

    model_config = ConfigDict(frozen=True)

    amount: Optional[str] = Field(None, description="Fixed-point amount, e.g. 10.00")
    currency_code: Optional[str] = Field(None, description="Merchant currency code")
    domain_id: Optional[str] = Field(None, description="Merchant ID at MOLPay")
    transaction_id: Optional[str] = Field(None, description="Merchant order number")
    transaction_reference: Optional[str] = Field(
        None, description="Transaction ID generated by MOLPay"
    )
    status: Optional[str] = Field(None, description="00, 11 or 22")
    app_code: Optional[str] = Field(None, description="Bank approval code")
    pay_date: Optional[str] = Field(None, description="Date/time of the transaction")
    verify_key: Optional[str] = Field(None, description="Verify key issued by MOLPay")
    received_signature: Optional[str] = Field(None, description="skey sent by MOLPay")
    error_message: Optional[str] = Field(None, description="Error reported by MOLPay")

    @field_validator("amount", mode="before")
    @classmethod
    def format_amount(cls, value: Any) -> Any:
        if isinstance(value, (Decimal, int, float)):
            return f"{Decimal(str(value)):.2f}"
        return value

    @field_validator("error_message")
    @classmethod
    def empty_error_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value == "":
            return None
        return value

    def require(self, *fields: str) -> tuple[str, ...]:
        """Return the values of `fields`, in order.

        Raises:
            MissingParameterError: For the first field that is None or empty.
        """
        values: list[str] = []
        for name in fields:
            value = getattr(self, name)
            if value is None or value == "":
                raise MissingParameterError(name)
            values.append(value)
        return tuple(values)


class VerifiedOutcome(BaseModel):
    """What a successful verification hands back to the merchant application."""

    model_config = ConfigDict(frozen=True)

    status: str
    transaction_id: str
    transaction_reference: str

    @property
    def is_successful(self) -> bool:
        return self.status == PaymentStatus.SUCCESS.value

    @property
    def is_failed(self) -> bool:
        return self.status == PaymentStatus.FAILURE.value

    @property
    def is_pending(self) -> bool:
        return self.status == PaymentStatus.PENDING.value
