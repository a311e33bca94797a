from __future__ import annotations

import os

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Typed merchant settings built from environment variables."""

    domain_id: str
    verify_key: str

    # IPN acknowledgement
    enable_ipn: bool = False
    ipn_base_url: str = "https://www.onlinepayment.com.my"
    http_timeout: float = 10.0

    @field_validator("domain_id", "verify_key")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        domain_id=os.environ.get("MOLPAY_DOMAIN_ID", ""),
        verify_key=os.environ.get("MOLPAY_VERIFY_KEY", ""),
        enable_ipn=os.environ.get("MOLPAY_ENABLE_IPN", "false").lower() == "true",
        ipn_base_url=os.environ.get(
            "MOLPAY_IPN_BASE_URL", "https://www.onlinepayment.com.my"
        ),
        http_timeout=float(os.environ.get("MOLPAY_HTTP_TIMEOUT", "10.0")),
    )
