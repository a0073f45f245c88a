"""Card tokenization.

Raw card data never leaves the process in clear text. It is encoded as a
form query string, encrypted with the gateway's RSA public key (PKCS#1
v1.5) and sent as ``card_hash`` in the form ``<key_id>_<base64>``.
"""

import base64
import logging
from dataclasses import replace
from urllib.parse import urlencode

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.serialization import load_pem_public_key

from pagarme_tx.exceptions import CardHashKeyError, InvalidTransactionError
from pagarme_tx.models.gateway import PublicKey
from pagarme_tx.models.transaction import CreditCard, HashedCard, Transaction

logger = logging.getLogger(__name__)


def load_public_key(pem: str) -> rsa.RSAPublicKey:
    """Parse a PEM encoded SubjectPublicKeyInfo RSA key.

    Raises
    ------
    CardHashKeyError
        If the PEM block or the DER payload is malformed, or the key is
        not RSA.
    """
    if not isinstance(pem, str):
        raise CardHashKeyError(f"public key must be a PEM string, got {type(pem).__name__}")
    try:
        key = load_pem_public_key(pem.encode("utf-8"))
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise CardHashKeyError(f"failed to parse public key: {exc}") from exc

    if not isinstance(key, rsa.RSAPublicKey):
        raise CardHashKeyError(f"public key is not RSA: {type(key).__name__}")
    return key


def card_query_string(card: CreditCard) -> str:
    """Form-encode the card fields in the order the gateway decrypts them."""
    return urlencode(
        [
            ("card_number", card.number),
            ("card_holder_name", card.holder_name),
            ("card_expiration_date", card.expiration_date),
            ("card_cvv", card.cvv),
        ]
    )


def create_card_hash(transaction: Transaction, public_key: PublicKey) -> Transaction:
    """Replace the raw card of ``transaction`` with its encrypted hash.

    Parameters
    ----------
    transaction : Transaction
        A credit card transaction still carrying raw card data.
    public_key : PublicKey
        Key material returned by the card hash key endpoint.

    Returns
    -------
    Transaction
        A copy whose payment is a :class:`HashedCard`; no raw card field
        survives.

    Raises
    ------
    InvalidTransactionError
        If the transaction has no raw card data (boleto, already hashed).
    CardHashKeyError
        If the key material cannot be used.
    """
    card = transaction.payment
    if not isinstance(card, CreditCard):
        raise InvalidTransactionError(
            f"Card hash requires raw card data, got {type(card).__name__}"
        )

    rsa_key = load_public_key(public_key.public_key)
    try:
        ciphertext = rsa_key.encrypt(card_query_string(card).encode("utf-8"), padding.PKCS1v15())
    except ValueError as exc:
        # Message longer than the key allows.
        raise CardHashKeyError(f"failed to encrypt card data: {exc}") from exc

    card_hash = f"{public_key.key_id}_{base64.b64encode(ciphertext).decode('ascii')}"
    logger.debug("Created card hash with key %d", public_key.key_id)
    return replace(transaction, payment=HashedCard(card_hash=card_hash))
