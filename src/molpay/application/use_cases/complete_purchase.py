"""Use case for completing a purchase from a MOLPay callback."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from ...domain.errors import IpnDeliveryError
from ...domain.shared import IpnClientFactory
from ...env import Settings
from ...infrastructure.molpay.ipn_client import AsyncIpnClient
from ..dtos import CompletePurchaseCallbackDTO, VerificationResult
from .signature_verifier import verify

logger = logging.getLogger(__name__)


class CompletePurchaseService:
    """Verifies MOLPay callbacks and, when enabled, acknowledges them via IPN."""

    def __init__(
        self,
        settings: Settings,
        *,
        ipn_client_factory: Optional[IpnClientFactory] = None,
    ):
        self.settings = settings
        self.ipn_client_factory: IpnClientFactory = ipn_client_factory or (
            lambda: AsyncIpnClient(settings.ipn_base_url, timeout=settings.http_timeout)
        )

    async def complete_purchase(self, params: Mapping[str, str]) -> VerificationResult:
        """Verify a callback and acknowledge it if verified.

        Args:
            params: Parameters as posted by MOLPay

        Returns:
            The verification result. Rejections are returned, not raised.

        Raises:
            IpnDeliveryError: If IPN is enabled and the echo could not be sent.
        """
        # 1) Map MOLPay parameter names onto the outcome
        dto = CompletePurchaseCallbackDTO.model_validate(params)
        outcome = dto.to_outcome(
            domain_id=self.settings.domain_id,
            verify_key=self.settings.verify_key,
        )

        # 2) Verify the skey
        result = verify(outcome)
        if not result.is_verified:
            logger.warning(
                "Rejected MOLPay callback for order %s: %s: %s",
                dto.transaction_id,
                type(result.error).__name__,
                result.error,
            )
            return result

        verified = result.unwrap()
        logger.info(
            "Verified MOLPay callback for order %s (tranID %s, status %s)",
            verified.transaction_id,
            verified.transaction_reference,
            verified.status,
        )

        # 3) Only verified callbacks are echoed back
        if self.settings.enable_ipn:
            await self._acknowledge(params)

        return result

    async def _acknowledge(self, params: Mapping[str, str]) -> None:
        try:
            async with self.ipn_client_factory() as client:
                await client.acknowledge(params)
        except IpnDeliveryError:
            logger.exception(
                "IPN acknowledgement failed for order %s", params.get("orderid")
            )
            raise
