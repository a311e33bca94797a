"""Shared domain utilities.

This package is domain-accessible and should not depend on application code.
"""

from .ipn_client_protocol import IpnClientProtocol, IpnClientFactory

__all__ = ["IpnClientProtocol", "IpnClientFactory"]
