"""Custom exception hierarchy for pagarme-tx."""


class PagarmeError(Exception):
    """Base exception for all pagarme-tx errors."""


class InvalidValueError(PagarmeError, ValueError):
    """Raised when a builder setter rejects a malformed value."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} is invalid. Value: {value}")


class InvalidTransactionError(PagarmeError):
    """Raised when a transaction is in the wrong state for the operation."""


class ConfigurationError(PagarmeError):
    """Raised when configuration is invalid or missing."""


class CardHashKeyError(ConfigurationError):
    """Raised when the gateway public key cannot be parsed."""


class GatewayError(PagarmeError):
    """Base exception for failures talking to the gateway."""

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)


class TransportError(GatewayError):
    """Raised on connection failures and timeouts."""

    def __init__(self, path: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Transport error. Path: {path}. Reason: {reason}", path)


class InternalError(GatewayError):
    """Raised when the gateway answers with HTTP 500."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Mundipagg internal error. Path: {path}", path)


class PublicKeyRetrievalError(GatewayError):
    """Raised when the card hash key endpoint does not answer 200."""

    def __init__(self, path: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(
            f"Public key retrieval failed. Path: {path}. Status: {status_code}", path
        )


class InvalidResponseError(GatewayError):
    """Raised when the gateway body is not the expected JSON."""
