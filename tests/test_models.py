"""Tests for domain models."""

from datetime import datetime, timezone

import pytest

from pagarme_tx.models import (
    Boleto,
    Card,
    CreditCard,
    Customer,
    CustomerType,
    Document,
    DocumentType,
    HashedCard,
    PaymentMethod,
    PublicKey,
    Transaction,
    TransactionResponse,
)


class TestEnums:
    """Tests for enumeration labels."""

    def test_labels(self) -> None:
        assert PaymentMethod.CREDIT_CARD.value == "credit_card"
        assert PaymentMethod.BOLETO.value == "boleto"
        assert CustomerType.INDIVIDUAL.value == "individual"
        assert CustomerType.CORPORATION.value == "corporation"
        assert DocumentType.CPF.value == "cpf"
        assert DocumentType.CNPJ.value == "cnpj"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("corporation", CustomerType.CORPORATION),
            ("CORPORATION", CustomerType.CORPORATION),
            ("individual", CustomerType.INDIVIDUAL),
            ("anything", CustomerType.INDIVIDUAL),
            ("", CustomerType.INDIVIDUAL),
        ],
    )
    def test_customer_type_from_value(self, value: str, expected: CustomerType) -> None:
        assert CustomerType.from_value(value) is expected


class TestTransaction:
    """Tests for Transaction payloads."""

    def test_empty_transaction(self) -> None:
        """Amount and customer are always present."""
        assert Transaction().to_dict() == {"amount": 0, "customer": {}}
        assert Transaction().to_json() == '{"amount":0,"customer":{}}'

    def test_payment_variants(self) -> None:
        assert Boleto().payment_method == PaymentMethod.BOLETO
        assert HashedCard("1_abc").payment_method == PaymentMethod.CREDIT_CARD
        card = CreditCard(number="1", holder_name="A", expiration_date="0121", cvv="123")
        assert card.payment_method == PaymentMethod.CREDIT_CARD

    def test_hashed_card_properties(self) -> None:
        transaction = Transaction(amount=100, payment=HashedCard("12_Zm9v"))

        assert transaction.card_hash == "12_Zm9v"
        assert transaction.card_number == ""
        assert not transaction.has_raw_card_data
        assert transaction.to_dict() == {
            "amount": 100,
            "card_hash": "12_Zm9v",
            "payment_method": "credit_card",
            "customer": {},
        }

    def test_credit_card_repr_hides_number_and_cvv(self) -> None:
        card = CreditCard(
            number="4111111111111111", holder_name="A", expiration_date="0121", cvv="123"
        )

        assert "4111111111111111" not in repr(card)
        assert "123" not in repr(card)

    def test_api_key_not_in_repr(self) -> None:
        assert "ak_test_secret" not in repr(Transaction(api_key="ak_test_secret"))

    def test_customer_payload(self) -> None:
        customer = Customer(
            name="ACME",
            country="BR",
            customer_type=CustomerType.CORPORATION,
            documents=(Document(DocumentType.CNPJ, "30516297000103"),),
        )

        assert customer.to_dict() == {
            "name": "ACME",
            "country": "BR",
            "type": "corporation",
            "documents": [{"type": "cnpj", "number": "30516297000103"}],
        }

    def test_customer_omits_empty(self) -> None:
        assert Customer(name="A").to_dict() == {"name": "A"}

    def test_non_ascii_kept(self) -> None:
        transaction = Transaction(customer=Customer(name="João"))
        assert '"name":"João"' in transaction.to_json()


class TestPublicKey:
    """Tests for PublicKey decoding."""

    def test_from_dict(self) -> None:
        key = PublicKey.from_dict({"id": 111, "public_key": "PEM", "ip": "10.0.0.1"})

        assert key == PublicKey(key_id=111, public_key="PEM", ip="10.0.0.1")

    def test_from_dict_missing_ip(self) -> None:
        assert PublicKey.from_dict({"id": "7", "public_key": "PEM"}).ip == ""

    def test_from_dict_missing_key(self) -> None:
        with pytest.raises(KeyError):
            PublicKey.from_dict({"id": 1})

    @pytest.mark.parametrize("pem", [None, 42, b"PEM"])
    def test_from_dict_non_string_key(self, pem: object) -> None:
        with pytest.raises(TypeError):
            PublicKey.from_dict({"id": 1, "public_key": pem})


class TestTransactionResponse:
    """Tests for TransactionResponse decoding."""

    def test_card_response(self) -> None:
        data = {
            "object": "transaction",
            "status": "paid",
            "refuse_reason": None,
            "acquirer_name": "pagarme",
            "tid": 1234,
            "nsu": 1234,
            "amount": 200,
            "installments": 1,
            "id": 1234,
            "card_brand": "visa",
            "card_last_digits": "1111",
            "payment_method": "credit_card",
            "date_created": "2024-05-03T14:22:10.123Z",
            "card": {
                "object": "card",
                "id": "card_abc",
                "brand": "visa",
                "holder_name": "Leandro",
                "first_digits": "411111",
                "last_digits": "1111",
                "valid": True,
                "expiration_date": "1028",
                "date_created": "2024-05-03T14:22:09.000Z",
            },
            "metadata": {},
            "unknown_field": "ignored",
        }

        response = TransactionResponse.from_dict(data)

        assert response.status == "paid"
        assert response.id == 1234
        assert response.date_created == datetime(2024, 5, 3, 14, 22, 10, 123000, tzinfo=timezone.utc)
        assert isinstance(response.card, Card)
        assert response.card.last_digits == "1111"
        assert response.card.valid is True
        assert response.boleto_url is None
        assert response.errors == []

    def test_refused(self) -> None:
        response = TransactionResponse.from_dict(
            {"status": "refused", "refuse_reason": "acquirer"}
        )

        assert response.is_refused
        assert response.refuse_reason == "acquirer"

    def test_empty(self) -> None:
        response = TransactionResponse.from_dict({})

        assert response.status is None
        assert response.card is None
        assert response.errors == []

    def test_null_card_and_errors(self) -> None:
        response = TransactionResponse.from_dict({"card": None, "errors": None})

        assert response.card is None
        assert response.errors == []
