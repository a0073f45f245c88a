"""Tests for custom exception hierarchy."""

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


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_pagarme_error_is_exception(self) -> None:
        assert isinstance(PagarmeError("test"), Exception)

    def test_invalid_value_is_pagarme_and_value_error(self) -> None:
        err = InvalidValueError("param", "value")
        assert isinstance(err, PagarmeError)
        assert isinstance(err, ValueError)

    def test_invalid_transaction_is_pagarme_error(self) -> None:
        assert isinstance(InvalidTransactionError("test"), PagarmeError)

    def test_card_hash_key_is_configuration_error(self) -> None:
        err = CardHashKeyError("bad pem")
        assert isinstance(err, ConfigurationError)
        assert isinstance(err, PagarmeError)

    def test_gateway_errors(self) -> None:
        for err in (
            TransportError("/transactions", "refused"),
            InternalError("/transactions"),
            PublicKeyRetrievalError("/transactions/card_hash_key", 403),
            InvalidResponseError("not json", "/transactions"),
        ):
            assert isinstance(err, GatewayError)
            assert isinstance(err, PagarmeError)

    def test_internal_and_transport_are_distinct(self) -> None:
        assert not isinstance(InternalError("/t"), TransportError)
        assert not isinstance(TransportError("/t", "x"), InternalError)


class TestExceptionMessages:
    """Test exception messages and attributes."""

    def test_internal_error(self) -> None:
        err = InternalError("/test")
        assert str(err) == "Mundipagg internal error. Path: /test"
        assert err.path == "/test"

    def test_invalid_value_error(self) -> None:
        err = InvalidValueError("param", "value")
        assert str(err) == "param is invalid. Value: value"
        assert err.field == "param"
        assert err.value == "value"

    def test_invalid_value_error_empty_value(self) -> None:
        assert str(InvalidValueError("Name", "")) == "Name is invalid. Value: "

    def test_public_key_retrieval_error(self) -> None:
        err = PublicKeyRetrievalError("/transactions/card_hash_key", 401)
        assert err.status_code == 401
        assert err.path == "/transactions/card_hash_key"
        assert "401" in str(err)

    def test_transport_error(self) -> None:
        err = TransportError("/transactions", "Connection refused")
        assert err.reason == "Connection refused"
        assert "/transactions" in str(err)
