"""Shared pytest fixtures for MOLPay completion tests."""

from __future__ import annotations

import hashlib

import pytest

from molpay.domain.entities import TransactionOutcome
from molpay.env import Settings


def md5_hex(data: str) -> str:
    return hashlib.md5(data.encode("utf-8")).hexdigest()


def expected_skey(
    *,
    transaction_reference: str,
    transaction_id: str,
    status: str,
    domain_id: str,
    amount: str,
    molpay_currency: str,
    pay_date: str,
    app_code: str,
    verify_key: str,
) -> str:
    """Independent computation of the two-stage skey."""
    pre_skey = md5_hex(
        transaction_reference
        + transaction_id
        + status
        + domain_id
        + amount
        + molpay_currency
    )
    return md5_hex(pay_date + domain_id + pre_skey + app_code + verify_key)


@pytest.fixture
def fields() -> dict[str, str]:
    """Field values of the end-to-end scenario."""
    return {
        "amount": "25.50",
        "currency_code": "MYR",
        "domain_id": "D100",
        "status": "00",
        "transaction_id": "INV001",
        "transaction_reference": "MP556677",
        "app_code": "APP1",
        "pay_date": "2024-01-01 10:00:00",
        "verify_key": "secretKey123",
    }


@pytest.fixture
def valid_skey(fields: dict[str, str]) -> str:
    return expected_skey(
        transaction_reference=fields["transaction_reference"],
        transaction_id=fields["transaction_id"],
        status=fields["status"],
        domain_id=fields["domain_id"],
        amount=fields["amount"],
        molpay_currency="RM",
        pay_date=fields["pay_date"],
        app_code=fields["app_code"],
        verify_key=fields["verify_key"],
    )


@pytest.fixture
def signed_outcome(fields: dict[str, str], valid_skey: str) -> TransactionOutcome:
    return TransactionOutcome(**fields, received_signature=valid_skey)


@pytest.fixture
def settings() -> Settings:
    return Settings(domain_id="D100", verify_key="secretKey123", enable_ipn=True)


@pytest.fixture
def callback_params(valid_skey: str) -> dict[str, str]:
    """Callback as MOLPay posts it for the end-to-end scenario."""
    return {
        "tranID": "MP556677",
        "orderid": "INV001",
        "status": "00",
        "domain": "D100",
        "amount": "25.50",
        "currency": "MYR",
        "appcode": "APP1",
        "paydate": "2024-01-01 10:00:00",
        "skey": valid_skey,
        "channel": "fpx",
        "error_code": "",
        "error_desc": "",
    }
