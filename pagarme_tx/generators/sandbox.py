"""Sandbox transaction generator."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from pagarme_tx.builder import TransactionBuilder
from pagarme_tx.generators.base import BaseGenerator
from pagarme_tx.models.enums import PaymentMethod
from pagarme_tx.models.transaction import Transaction


class SandboxTransactionGenerator(BaseGenerator):
    """Generate valid transactions with synthetic customers and cards.

    Every value goes through :class:`TransactionBuilder`, so generated
    transactions satisfy the same validation as caller input. Meant for
    test API keys only.

    Parameters
    ----------
    api_key : str
        Credential stamped on generated transactions.
    seed : int | None
        Random seed for reproducibility.
    corporation_rate : float
        Share of customers identified by CNPJ instead of CPF.
    """

    AMOUNT_RANGE = (1.0, 500.0)  # BRL
    CARD_TYPE = "visa16"

    def __init__(
        self,
        api_key: str = "",
        seed: int | None = None,
        corporation_rate: float = 0.2,
    ) -> None:
        super().__init__(seed)
        self.corporation_rate = corporation_rate
        self._builder = TransactionBuilder(api_key)

    def generate(self, payment_method: PaymentMethod | str) -> Transaction:
        """Generate a single transaction for ``payment_method``."""
        payment_method = PaymentMethod(payment_method)
        self._fill_customer()
        self._builder.amount(self._amount()).payment_method(payment_method)
        if payment_method is PaymentMethod.CREDIT_CARD:
            self._fill_card()
        return self._builder.build()

    def generate_boleto(self) -> Transaction:
        return self.generate(PaymentMethod.BOLETO)

    def generate_credit_card(self) -> Transaction:
        return self.generate(PaymentMethod.CREDIT_CARD)

    def generate_batch(
        self,
        count: int,
        payment_method: PaymentMethod | None = None,
    ) -> Iterator[Transaction]:
        """Generate multiple transactions.

        Parameters
        ----------
        count : int
            Number of transactions to generate.
        payment_method : PaymentMethod | None
            Fixed payment method, or ``None`` for a random mix.

        Yields
        ------
        Transaction
            Generated transactions.
        """
        for _ in range(count):
            method = payment_method or self.random.choice(list(PaymentMethod))
            yield self.generate(method)

    def _amount(self) -> Decimal:
        low, high = self.AMOUNT_RANGE
        return Decimal(f"{self.random.uniform(low, high):.2f}")

    def _fill_customer(self) -> None:
        if self.random.random() < self.corporation_rate:
            self._builder.name(self.fake.company()).document(self.fake.cnpj())
        else:
            self._builder.name(self.fake.name()).document(self.fake.cpf())
        self._builder.country("BR")

    def _fill_card(self) -> None:
        (
            self._builder.card_number(self.fake.credit_card_number(card_type=self.CARD_TYPE))
            .card_holder_name(self.fake.name().upper())
            .card_expiration_date(self.fake.credit_card_expire(date_format="%m%y"))
            .card_cvv(self.fake.credit_card_security_code(card_type="visa"))
        )
