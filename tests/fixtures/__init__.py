"""Test fixtures and fakes."""

from .fake_ipn_client import FakeIpnClient

__all__ = ["FakeIpnClient"]
