"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
import requests
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from pagarme_tx.builder import TransactionBuilder
from pagarme_tx.client import GatewayClient
from pagarme_tx.config import GatewayConfig
from pagarme_tx.models.enums import PaymentMethod
from pagarme_tx.models.gateway import PublicKey
from pagarme_tx.models.transaction import Transaction

API_KEY = "ak_test_qCS4GVwDKJhzbTn0Z3KIU4p4k79U17"
BASE_URL = "https://api.pagar.me.test/1"


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return API_KEY


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """RSA key pair standing in for the gateway's card hash key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key(rsa_private_key: rsa.RSAPrivateKey) -> PublicKey:
    """Public key record as returned by the card hash key endpoint."""
    pem = rsa_private_key.public_key().public_bytes(
        Encoding.PEM, PublicFormat.SubjectPublicKeyInfo
    )
    return PublicKey(key_id=1870, public_key=pem.decode("ascii"), ip="127.0.0.1")


@pytest.fixture
def boleto_builder(api_key: str) -> TransactionBuilder:
    """Builder filled with the reference boleto transaction."""
    return (
        TransactionBuilder(api_key)
        .amount(2.0)
        .name("Leandro Greijal")
        .country("BR")
        .payment_method(PaymentMethod.BOLETO)
        .document("251.854.650-26")
    )


@pytest.fixture
def boleto_transaction(boleto_builder: TransactionBuilder) -> Transaction:
    """Finalized reference boleto transaction."""
    return boleto_builder.build()


@pytest.fixture
def card_transaction(api_key: str) -> Transaction:
    """Finalized credit card transaction with raw card data."""
    return (
        TransactionBuilder(api_key)
        .amount(2.0)
        .name("Leandro Greijal")
        .country("BR")
        .document("251.854.650-26")
        .payment_method(PaymentMethod.CREDIT_CARD)
        .card_number("4111111111111111")
        .card_holder_name("Leandro")
        .card_expiration_date("1028")
        .card_cvv("123")
        .build()
    )


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for real ``requests.Response`` objects."""

    def _make(status_code: int, body: Any = b"") -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        response.encoding = "utf-8"
        response.headers["Content-Type"] = "application/json"
        return response

    return _make


@pytest.fixture
def session() -> MagicMock:
    """Mocked HTTP transport."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def gateway_config(api_key: str) -> GatewayConfig:
    """Config pointing at a fake gateway."""
    return GatewayConfig(base_url=BASE_URL, api_key=api_key, timeout=5.0)


@pytest.fixture
def client(gateway_config: GatewayConfig, session: MagicMock) -> GatewayClient:
    """Client wired to the mocked session."""
    return GatewayClient(gateway_config, session=session)
