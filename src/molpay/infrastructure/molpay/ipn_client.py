from __future__ import annotations

import logging
from typing import Mapping, Optional, Type
from types import TracebackType

import httpx

from ...domain.errors import IpnDeliveryError
from ..http.http_client import AsyncHttpClient

logger = logging.getLogger(__name__)

IPN_PATH = "/MOLPay/API/chkstat/returnipn.php"


class AsyncIpnClient:
    """Asynchronous client for the MOLPay IPN echo endpoint.

    MOLPay expects the merchant to post back every parameter it received,
    plus `treq=1`, to confirm the notification arrived.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = AsyncHttpClient(base_url, timeout=timeout, transport=transport)

    async def acknowledge(self, params: Mapping[str, str]) -> None:
        data = dict(params)
        data["treq"] = "1"
        try:
            await self._http.post_form(IPN_PATH, data)
        except httpx.HTTPStatusError as e:
            raise IpnDeliveryError(
                f"MOLPay rejected IPN echo: HTTP {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise IpnDeliveryError(f"Could not connect to MOLPay: {e}") from e
        logger.info("IPN echo sent for order %s", data.get("orderid"))

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncIpnClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
