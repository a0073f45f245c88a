"""HTTP client for the Pagar.me transactions API."""

from __future__ import annotations

import logging
from typing import Any

import requests

from pagarme_tx.card_hash import create_card_hash
from pagarme_tx.config import GatewayConfig
from pagarme_tx.exceptions import (
    ConfigurationError,
    InternalError,
    InvalidResponseError,
    InvalidTransactionError,
    PublicKeyRetrievalError,
    TransportError,
)
from pagarme_tx.models.enums import AuthenticationMethod
from pagarme_tx.models.gateway import PublicKey, TransactionResponse
from pagarme_tx.models.transaction import CreditCard, Transaction

logger = logging.getLogger(__name__)

PATH_TRANSACTION = "/transactions"
PATH_HASH = "/transactions/card_hash_key"
BASIC_AUTH_PASSWORD = "x"


class GatewayClient:
    """Execute transactions against the gateway.

    The client holds no per-transaction state and may be shared by
    callers issuing independent transactions, as long as the underlying
    ``requests.Session`` is.

    Parameters
    ----------
    config : GatewayConfig
        Base URL, API key and timeout.
    session : requests.Session | None
        HTTP transport. A new session is created when omitted.
    """

    def __init__(
        self,
        config: GatewayConfig,
        session: requests.Session | None = None,
    ) -> None:
        if not config.api_key:
            raise ConfigurationError("Gateway API key is not configured")
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.session = session or requests.Session()

    def recover_public_key(self) -> PublicKey:
        """Fetch the RSA key used to build card hashes.

        Raises
        ------
        TransportError
            On connection failures and timeouts.
        PublicKeyRetrievalError
            If the gateway does not answer 200.
        InvalidResponseError
            If the body is not a key record.
        """
        logger.info("Recovering public key")
        response = self._send(
            "GET",
            PATH_HASH,
            json={"api_key": self.config.api_key},
        )

        if response.status_code != 200:
            logger.error("Public key request failed with status %d", response.status_code)
            raise PublicKeyRetrievalError(PATH_HASH, response.status_code)

        data = self._decode(response, PATH_HASH)
        try:
            return PublicKey.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidResponseError(f"Malformed public key record: {exc}", PATH_HASH) from exc

    def execute(
        self,
        transaction: Transaction,
        auth_method: AuthenticationMethod = AuthenticationMethod.BODY,
    ) -> TransactionResponse:
        """Submit a finalized transaction.

        Any status other than 500 is a successful execution: a refused
        transaction comes back as a response with ``status == "refused"``.

        Raises
        ------
        InvalidTransactionError
            If the transaction still carries raw card data.
        TransportError
            On connection failures and timeouts.
        InternalError
            If the gateway answers 500.
        InvalidResponseError
            If the body is not JSON.
        """
        if transaction.has_raw_card_data:
            raise InvalidTransactionError("Refusing to send raw card data; create a card hash first")

        auth_method = AuthenticationMethod(auth_method)
        params: dict[str, str] | None = None
        auth: tuple[str, str] | None = None
        if auth_method is AuthenticationMethod.PARAM:
            params = {"api_key": self.config.api_key}
        elif auth_method is AuthenticationMethod.BASIC_AUTH:
            auth = (self.config.api_key, BASIC_AUTH_PASSWORD)

        logger.info(
            "Executing transaction: payment_method=%s auth=%s",
            transaction.payment_method.value if transaction.payment_method else None,
            auth_method.value,
        )
        response = self._send(
            "POST",
            PATH_TRANSACTION,
            data=transaction.to_json().encode("utf-8"),
            params=params,
            auth=auth,
        )

        if response.status_code == 500:
            error = InternalError(PATH_TRANSACTION)
            logger.error("Gateway response error: %s", error)
            raise error

        data = self._decode(response, PATH_TRANSACTION)
        result = TransactionResponse.from_dict(data)
        logger.info("Transaction %s: status=%s", result.id, result.status)
        return result

    def submit(
        self,
        transaction: Transaction,
        auth_method: AuthenticationMethod = AuthenticationMethod.BODY,
    ) -> TransactionResponse:
        """Tokenize card transactions if needed, then execute.

        Key retrieval and execution run strictly in sequence since the
        card hash depends on the key just recovered.
        """
        if isinstance(transaction.payment, CreditCard):
            transaction = create_card_hash(transaction, self.recover_public_key())
        return self.execute(transaction, auth_method)

    def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("Request %s %s", method, path)
        try:
            response = self.session.request(
                method,
                url,
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.error("Gateway request %s %s failed: %s", method, path, exc)
            raise TransportError(path, str(exc)) from exc
        logger.debug("Response %s %s: %d", method, path, response.status_code)
        return response

    @staticmethod
    def _decode(response: requests.Response, path: str) -> dict[str, Any]:
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            raise InvalidResponseError(f"Response is not JSON: {exc}", path) from exc
        if not isinstance(data, dict):
            raise InvalidResponseError("Response is not a JSON object", path)
        return data
