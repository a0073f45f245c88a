"""Domain models for gateway transactions."""

from pagarme_tx.models.enums import (
    AuthenticationMethod,
    CustomerType,
    DocumentType,
    PaymentMethod,
)
from pagarme_tx.models.gateway import Card, PublicKey, TransactionResponse
from pagarme_tx.models.transaction import (
    Boleto,
    CreditCard,
    Customer,
    Document,
    HashedCard,
    Payment,
    Transaction,
)

__all__ = [
    "AuthenticationMethod",
    "Boleto",
    "Card",
    "CreditCard",
    "Customer",
    "CustomerType",
    "Document",
    "DocumentType",
    "HashedCard",
    "Payment",
    "PaymentMethod",
    "PublicKey",
    "Transaction",
    "TransactionResponse",
]
