"""Signature verification for MOLPay completion callbacks.

Pure function: no I/O, no logging, and the outcome passed in is never
modified. Failures are returned inside the result rather than raised, so a
rejection can never be mistaken for an unrelated fault.
"""

from __future__ import annotations

from ...crypto.skey import derive_skey
from ...domain.entities import TransactionOutcome, VerifiedOutcome
from ...domain.errors import (
    MissingParameterError,
    SignatureMismatchError,
    UpstreamError,
)
from ..dtos import VerificationResult


def verify(outcome: TransactionOutcome) -> VerificationResult:
    """Decide whether a completion callback is authentic.

    Args:
        outcome: The transaction fields received from MOLPay

    Returns:
        A verified result carrying status, transaction_id and
        transaction_reference, or a rejected result carrying an
        UpstreamError, MissingParameterError or SignatureMismatchError.
    """
    # MOLPay flagged the callback itself, skip the signature check.
    if outcome.error_message is not None:
        return VerificationResult.rejected(UpstreamError(outcome.error_message))

    try:
        (received_signature,) = outcome.require("received_signature")
        expected_signature = derive_skey(outcome)
    except MissingParameterError as e:
        return VerificationResult.rejected(e)

    # Plain equality: both sides are lowercase hex.
    if expected_signature != received_signature:
        return VerificationResult.rejected(SignatureMismatchError())

    (status, transaction_id, transaction_reference) = outcome.require(
        "status", "transaction_id", "transaction_reference"
    )
    return VerificationResult.verified(
        VerifiedOutcome(
            status=status,
            transaction_id=transaction_id,
            transaction_reference=transaction_reference,
        )
    )
