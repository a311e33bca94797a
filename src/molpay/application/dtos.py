"""Data Transfer Objects for the completion flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entities import TransactionOutcome, VerifiedOutcome
from ..domain.errors import VerificationError


class CompletePurchaseCallbackDTO(BaseModel):
    """Parameters MOLPay posts to the merchant return/notification URL.

    Field aliases are MOLPay's own parameter names. Unknown parameters are
    kept so they can be echoed back in the IPN acknowledgement.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        json_schema_extra={
            "example": {
                "tranID": "MP556677",
                "orderid": "INV001",
                "status": "00",
                "domain": "D100",
                "amount": "25.50",
                "currency": "MYR",
                "appcode": "APP1",
                "paydate": "2024-01-01 10:00:00",
                "skey": "0f9c...",
            }
        },
    )

    transaction_reference: Optional[str] = Field(None, alias="tranID")
    transaction_id: Optional[str] = Field(None, alias="orderid")
    status: Optional[str] = None
    domain: Optional[str] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    app_code: Optional[str] = Field(None, alias="appcode")
    pay_date: Optional[str] = Field(None, alias="paydate")
    skey: Optional[str] = None
    error_desc: Optional[str] = None

    def to_outcome(self, *, domain_id: str, verify_key: str) -> TransactionOutcome:
        """Build the outcome to verify, taking merchant identity from configuration."""
        return TransactionOutcome(
            amount=self.amount,
            currency_code=self.currency,
            domain_id=domain_id,
            transaction_id=self.transaction_id,
            transaction_reference=self.transaction_reference,
            status=self.status,
            app_code=self.app_code,
            pay_date=self.pay_date,
            verify_key=verify_key,
            received_signature=self.skey,
            error_message=self.error_desc,
        )


@dataclass(frozen=True)
class VerificationResult:
    """Either a verified outcome or the reason it was rejected, never both."""

    outcome: Optional[VerifiedOutcome] = None
    error: Optional[VerificationError] = None

    def __post_init__(self) -> None:
        if (self.outcome is None) == (self.error is None):
            raise ValueError("Exactly one of outcome or error must be set")

    @staticmethod
    def verified(outcome: VerifiedOutcome) -> "VerificationResult":
        return VerificationResult(outcome=outcome)

    @staticmethod
    def rejected(error: VerificationError) -> "VerificationResult":
        return VerificationResult(error=error)

    @property
    def is_verified(self) -> bool:
        return self.outcome is not None

    def unwrap(self) -> VerifiedOutcome:
        """Return the verified outcome, raising the rejection error otherwise."""
        if self.error is not None:
            raise self.error
        return self.outcome
