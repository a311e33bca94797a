"""Domain-specific exceptions."""

from __future__ import annotations


class VerificationError(Exception):
    """Base class for every reason a completion callback is rejected."""


class MissingParameterError(VerificationError):
    """Raised when a field required by a digest stage is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"The {field} parameter is required")


class UpstreamError(VerificationError):
    """MOLPay reported an error itself; no signature check was attempted."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SignatureMismatchError(VerificationError):
    """Computed skey does not match the one sent by MOLPay."""

    def __init__(self, message: str = "Invalid security key") -> None:
        super().__init__(message)


class IpnDeliveryError(Exception):
    """Raised when the IPN acknowledgement could not be delivered to MOLPay."""
