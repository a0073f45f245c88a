"""Format validators for transaction fields.

Every validator returns the normalized value or raises
:class:`~pagarme_tx.exceptions.InvalidValueError` naming the field and the
offending raw value.
"""

import re
from decimal import Decimal, InvalidOperation

from pagarme_tx.exceptions import InvalidValueError
from pagarme_tx.models.enums import DocumentType
from pagarme_tx.models.transaction import Document

CPF_PATTERN = re.compile(r"[0-9]{3}\.[0-9]{3}\.[0-9]{3}-[0-9]{2}")
CNPJ_PATTERN = re.compile(r"[0-9]{2}\.[0-9]{3}\.[0-9]{3}/[0-9]{4}-[0-9]{2}")
EXPIRATION_DATE_PATTERN = re.compile(r"[0-9]{4}")
CARD_NUMBER_PATTERN = re.compile(r"[0-9]+")
CVV_PATTERN = re.compile(r"[0-9]{3}")
COUNTRY_PATTERN = re.compile(r"[A-Za-z]{2}")
MINOR_UNITS_PATTERN = re.compile(r"-?[0-9]+")

# Largest accepted power of ten; bounds the digits produced below.
MAX_AMOUNT_EXPONENT = 15

DOCUMENT_PUNCTUATION = str.maketrans("", "", ".-/")


def normalize_amount(value: int | float | Decimal | str) -> int:
    """Convert a decimal amount to integer minor units.

    The amount is formatted with exactly two fraction digits and the
    separators are removed, so ``2.0`` becomes ``200``. The sign is not
    checked; magnitudes of ``10**16`` and above are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        raise InvalidValueError("Amount", value)

    number: int | float | Decimal = value  # type: ignore[assignment]
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidValueError("Amount", value) from None

    if (
        isinstance(number, Decimal)
        and number.is_finite()
        and number.adjusted() > MAX_AMOUNT_EXPONENT
    ):
        raise InvalidValueError("Amount", value)

    try:
        digits = format(number, ".2f").replace(".", "").replace(",", "")
    except OverflowError:
        raise InvalidValueError("Amount", value) from None
    if not MINOR_UNITS_PATTERN.fullmatch(digits) or len(digits) > MAX_AMOUNT_EXPONENT + 4:
        raise InvalidValueError("Amount", value)
    return int(digits)


def validate_card_holder_name(value: str) -> str:
    if not value:
        raise InvalidValueError("CardHolderName", value)
    return value


def validate_name(value: str) -> str:
    if not value or not value.strip():
        raise InvalidValueError("Name", value)
    return value


def validate_card_expiration_date(value: str) -> str:
    """Expiration date in ``MMYY`` form."""
    return _require(EXPIRATION_DATE_PATTERN, "CardExpirationDate", value)


def validate_card_number(value: str) -> str:
    return _require(CARD_NUMBER_PATTERN, "CardNumber", value)


def validate_card_cvv(value: str) -> str:
    return _require(CVV_PATTERN, "CardCVV", value)


def validate_country(value: str) -> str:
    return _require(COUNTRY_PATTERN, "Country", value)


def parse_document(value: str) -> Document:
    """Parse a formatted CPF or CNPJ.

    CPF (``DDD.DDD.DDD-DD``) is tried first, then CNPJ
    (``DD.DDD.DDD/DDDD-DD``). The returned document number is digits only.

    Raises
    ------
    InvalidValueError
        If the value matches neither format.
    """
    if isinstance(value, str):
        if CPF_PATTERN.fullmatch(value):
            return Document(DocumentType.CPF, value.translate(DOCUMENT_PUNCTUATION))
        if CNPJ_PATTERN.fullmatch(value):
            return Document(DocumentType.CNPJ, value.translate(DOCUMENT_PUNCTUATION))
    raise InvalidValueError("Document.Number", value)


def _require(pattern: re.Pattern[str], field: str, value: str) -> str:
    if not isinstance(value, str) or not pattern.fullmatch(value):
        raise InvalidValueError(field, value)
    return value
