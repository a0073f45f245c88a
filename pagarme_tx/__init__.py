"""Boleto and credit card transactions for the Pagar.me API."""

from pagarme_tx.builder import TransactionBuilder
from pagarme_tx.card_hash import create_card_hash
from pagarme_tx.client import GatewayClient
from pagarme_tx.config import GatewayConfig
from pagarme_tx.exceptions import (
    CardHashKeyError,
    ConfigurationError,
    GatewayError,
    InternalError,
    InvalidResponseError,
    InvalidTransactionError,
    InvalidValueError,
    PagarmeError,
    PublicKeyRetrievalError,
    TransportError,
)
from pagarme_tx.models import (
    AuthenticationMethod,
    CustomerType,
    DocumentType,
    PaymentMethod,
    PublicKey,
    Transaction,
    TransactionResponse,
)

__version__ = "0.1.0"

__all__ = [
    "AuthenticationMethod",
    "CardHashKeyError",
    "ConfigurationError",
    "CustomerType",
    "DocumentType",
    "GatewayClient",
    "GatewayConfig",
    "GatewayError",
    "InternalError",
    "InvalidResponseError",
    "InvalidTransactionError",
    "InvalidValueError",
    "PagarmeError",
    "PaymentMethod",
    "PublicKey",
    "Transaction",
    "TransactionBuilder",
    "TransactionResponse",
    "TransportError",
    "create_card_hash",
]
