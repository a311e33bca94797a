from __future__ import annotations

import hashlib
from typing import Final

from ..domain.entities import TransactionOutcome


MD5: Final[str] = "md5"

# MOLPay reports Malaysian Ringgit as "RM" rather than the ISO code.
MYR: Final[str] = "MYR"
MOLPAY_MYR: Final[str] = "RM"

PRE_SKEY_FIELDS: Final[tuple[str, ...]] = (
    "amount",
    "currency_code",
    "domain_id",
    "status",
    "transaction_id",
    "transaction_reference",
)
SKEY_FIELDS: Final[tuple[str, ...]] = (
    "app_code",
    "domain_id",
    "pay_date",
    "verify_key",
)


def hash_hex(data: str) -> str:
    """Hash a UTF-8 string (fixed algorithm: MD5) and return lowercase hex."""
    return hashlib.new(MD5, data.encode("utf-8"), usedforsecurity=False).hexdigest()


def normalize_currency(currency_code: str) -> str:
    """Map a merchant currency code to the form MOLPay signs with."""
    return MOLPAY_MYR if currency_code == MYR else currency_code


def derive_pre_skey(outcome: TransactionOutcome) -> str:
    """
    First hash of the skey chain:

      md5(tranID . orderid . status . domain . amount . currency)

    Raises MissingParameterError naming the first absent field.
    """
    amount, currency_code, domain_id, status, transaction_id, reference = (
        outcome.require(*PRE_SKEY_FIELDS)
    )
    return hash_hex(
        reference
        + transaction_id
        + status
        + domain_id
        + amount
        + normalize_currency(currency_code)
    )


def derive_skey(outcome: TransactionOutcome) -> str:
    """
    Final hash of the skey chain, i.e. the signature MOLPay should have sent:

      md5(paydate . domain . pre_skey . appcode . verify_key)

    Its own fields are checked before the first stage runs.
    """
    app_code, domain_id, pay_date, verify_key = outcome.require(*SKEY_FIELDS)
    return hash_hex(
        pay_date + domain_id + derive_pre_skey(outcome) + app_code + verify_key
    )
