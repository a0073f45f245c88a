"""Transaction models sent to the gateway."""

from dataclasses import dataclass, field
from typing import Any, Union

from pagarme_tx.models.enums import CustomerType, DocumentType, PaymentMethod
from pagarme_tx.serialization import compact, to_json


@dataclass(frozen=True)
class Document:
    """National tax document, digits only."""

    document_type: DocumentType
    number: str

    def to_dict(self) -> dict[str, Any]:
        return compact({"type": self.document_type.value, "number": self.number})


@dataclass(frozen=True)
class Customer:
    """Transaction customer.

    ``customer_type`` follows the last accepted document unless it was
    set explicitly afterwards.
    """

    name: str = ""
    country: str = ""  # ISO 3166-1 alpha-2
    customer_type: CustomerType | None = None
    documents: tuple[Document, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return compact(
            {
                "name": self.name,
                "country": self.country,
                "type": self.customer_type.value if self.customer_type else None,
                "documents": [document.to_dict() for document in self.documents],
            }
        )


@dataclass(frozen=True)
class Boleto:
    """Boleto payment. Carries no card data."""

    payment_method = PaymentMethod.BOLETO


@dataclass(frozen=True)
class CreditCard:
    """Credit card payment with raw card data, before tokenization."""

    number: str = field(repr=False)
    holder_name: str
    expiration_date: str  # MMYY
    cvv: str = field(repr=False)

    payment_method = PaymentMethod.CREDIT_CARD


@dataclass(frozen=True)
class HashedCard:
    """Credit card payment after tokenization."""

    card_hash: str

    payment_method = PaymentMethod.CREDIT_CARD


Payment = Union[Boleto, CreditCard, HashedCard]


@dataclass(frozen=True)
class Transaction:
    """Finalized transaction, produced by ``TransactionBuilder.build``."""

    api_key: str = field(default="", repr=False)
    amount: int = 0  # minor units (cents)
    payment: Payment | None = None
    customer: Customer = field(default_factory=Customer)

    @property
    def payment_method(self) -> PaymentMethod | None:
        return self.payment.payment_method if self.payment else None

    @property
    def has_raw_card_data(self) -> bool:
        return isinstance(self.payment, CreditCard)

    @property
    def card_hash(self) -> str:
        return self.payment.card_hash if isinstance(self.payment, HashedCard) else ""

    @property
    def card_number(self) -> str:
        return self.payment.number if isinstance(self.payment, CreditCard) else ""

    @property
    def card_holder_name(self) -> str:
        return self.payment.holder_name if isinstance(self.payment, CreditCard) else ""

    @property
    def card_expiration_date(self) -> str:
        return self.payment.expiration_date if isinstance(self.payment, CreditCard) else ""

    @property
    def card_cvv(self) -> str:
        return self.payment.cvv if isinstance(self.payment, CreditCard) else ""

    def to_dict(self, include_api_key: bool = True) -> dict[str, Any]:
        """Build the wire payload.

        Empty optional fields are omitted; ``amount`` and ``customer`` are
        always present.
        """
        payload = compact(
            {
                "api_key": self.api_key if include_api_key else None,
                "amount": self.amount,
                "card_hash": self.card_hash,
                "card_holder_name": self.card_holder_name,
                "card_expiration_date": self.card_expiration_date,
                "card_number": self.card_number,
                "card_cvv": self.card_cvv,
                "payment_method": self.payment_method,
            }
        )
        payload["customer"] = self.customer.to_dict()
        return payload

    def to_json(self, include_api_key: bool = True) -> str:
        return to_json(self.to_dict(include_api_key=include_api_key))
