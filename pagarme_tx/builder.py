"""Validating builder for gateway transactions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from pagarme_tx import validators
from pagarme_tx.models.enums import CustomerType, DocumentType, PaymentMethod
from pagarme_tx.models.transaction import (
    Boleto,
    CreditCard,
    Customer,
    Document,
    Payment,
    Transaction,
)

logger = logging.getLogger(__name__)


@dataclass
class _Draft:
    """In-progress transaction fields."""

    amount: int = 0
    payment_method: PaymentMethod | None = None
    card_number: str = ""
    card_holder_name: str = ""
    card_expiration_date: str = ""
    card_cvv: str = ""
    name: str = ""
    country: str = ""
    customer_type: CustomerType | None = None
    documents: list[Document] = field(default_factory=list)

    @property
    def has_card_data(self) -> bool:
        return any(
            (self.card_number, self.card_holder_name, self.card_expiration_date, self.card_cvv)
        )


class TransactionBuilder:
    """Accumulate validated fields into a :class:`Transaction`.

    Setters return the builder so calls can be chained. A rejected value
    raises :class:`~pagarme_tx.exceptions.InvalidValueError` and leaves the
    builder untouched. :meth:`build` returns the finished transaction and
    starts over from an empty draft, so one builder can issue several
    transactions in sequence. A builder is not meant to be shared between
    threads.

    Parameters
    ----------
    api_key : str
        Credential stamped onto every built transaction.
    """

    def __init__(self, api_key: str = "") -> None:
        self.api_key = api_key
        self._draft = _Draft()

    def build(self) -> Transaction:
        """Finalize the current draft and reset the builder.

        Returns
        -------
        Transaction
            Immutable transaction carrying the API key.
        """
        draft, self._draft = self._draft, _Draft()
        transaction = Transaction(
            api_key=self.api_key,
            amount=draft.amount,
            payment=self._resolve_payment(draft),
            customer=Customer(
                name=draft.name,
                country=draft.country,
                customer_type=draft.customer_type,
                documents=tuple(draft.documents),
            ),
        )
        logger.debug(
            "Built transaction: amount=%d payment_method=%s documents=%d",
            transaction.amount,
            transaction.payment_method.value if transaction.payment_method else None,
            len(transaction.customer.documents),
        )
        return transaction

    def amount(self, value: int | float | Decimal | str) -> TransactionBuilder:
        self._draft.amount = validators.normalize_amount(value)
        return self

    def payment_method(self, value: PaymentMethod) -> TransactionBuilder:
        self._draft.payment_method = PaymentMethod(value)
        return self

    def customer_type(self, value: CustomerType) -> TransactionBuilder:
        self._draft.customer_type = CustomerType(value)
        return self

    def card_holder_name(self, value: str) -> TransactionBuilder:
        self._draft.card_holder_name = validators.validate_card_holder_name(value)
        return self

    def name(self, value: str) -> TransactionBuilder:
        self._draft.name = validators.validate_name(value)
        return self

    def card_expiration_date(self, value: str) -> TransactionBuilder:
        self._draft.card_expiration_date = validators.validate_card_expiration_date(value)
        return self

    def card_number(self, value: str) -> TransactionBuilder:
        self._draft.card_number = validators.validate_card_number(value)
        return self

    def card_cvv(self, value: str) -> TransactionBuilder:
        self._draft.card_cvv = validators.validate_card_cvv(value)
        return self

    def country(self, value: str) -> TransactionBuilder:
        self._draft.country = validators.validate_country(value)
        return self

    def document(self, value: str) -> TransactionBuilder:
        """Append a CPF or CNPJ and derive the customer type from it.

        Each accepted document overwrites the customer type, so after a
        CPF followed by a CNPJ the customer is a corporation.
        """
        document = validators.parse_document(value)
        self._draft.documents.append(document)
        self._draft.customer_type = (
            CustomerType.CORPORATION
            if document.document_type is DocumentType.CNPJ
            else CustomerType.INDIVIDUAL
        )
        return self

    @staticmethod
    def _resolve_payment(draft: _Draft) -> Payment | None:
        if draft.payment_method is PaymentMethod.BOLETO:
            if draft.has_card_data:
                logger.warning("Discarding card fields on a boleto transaction")
            return Boleto()
        if draft.payment_method is PaymentMethod.CREDIT_CARD or draft.has_card_data:
            return CreditCard(
                number=draft.card_number,
                holder_name=draft.card_holder_name,
                expiration_date=draft.card_expiration_date,
                cvv=draft.card_cvv,
            )
        return None
