"""Protocol interface for IPN acknowledgement clients.

Services depend on this contract instead of the httpx-backed client, so tests
can pass in a recording fake.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Protocol, Type
from types import TracebackType


class IpnClientProtocol(Protocol):
    """Sends the IPN echo that tells MOLPay the merchant received a callback."""

    async def acknowledge(self, params: Mapping[str, str]) -> None:
        """Echo the callback parameters back to MOLPay.

        Args:
            params: The parameters exactly as MOLPay posted them

        Raises:
            IpnDeliveryError: If MOLPay could not be reached or rejected the echo
        """
        ...

    async def aclose(self) -> None: ...

    async def __aenter__(self: "IpnClientProtocol") -> "IpnClientProtocol": ...

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None: ...


# Factory type for creating IPN clients, one per acknowledgement
IpnClientFactory = Callable[[], IpnClientProtocol]
