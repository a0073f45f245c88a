"""Models decoded from gateway responses."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

from pagarme_tx.serialization import parse_datetime


@dataclass(frozen=True)
class PublicKey:
    """RSA key material used to build a card hash."""

    key_id: int
    public_key: str  # PEM
    ip: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PublicKey":
        pem = data["public_key"]
        if not isinstance(pem, str):
            raise TypeError(f"public_key must be a string, got {type(pem).__name__}")
        return cls(key_id=int(data["id"]), public_key=pem, ip=data.get("ip") or "")


@dataclass
class Card:
    """Card summary echoed back by the gateway."""

    id: str | None = None
    date_created: datetime | None = None
    date_updated: datetime | None = None
    brand: str | None = None
    holder_name: str | None = None
    first_digits: str | None = None
    last_digits: str | None = None
    country: str | None = None
    fingerprint: str | None = None
    valid: bool | None = None
    expiration_date: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        return cls(**_pick(cls, data))


@dataclass
class TransactionResponse:
    """Transaction result.

    A refused transaction is still a successful response; read ``status``
    to tell ``paid``/``authorized``/``waiting_payment`` from ``refused``.
    Fields that do not apply to the payment method stay ``None``.
    """

    object: str | None = None
    status: str | None = None
    refuse_reason: str | None = None
    status_reason: str | None = None
    acquirer_response_code: str | None = None
    acquirer_name: str | None = None
    acquirer_id: str | None = None
    tid: int | str | None = None
    nsu: int | str | None = None
    date_created: datetime | None = None
    date_updated: datetime | None = None
    amount: int | None = None
    installments: int | None = None
    id: int | None = None
    card_holder_name: str | None = None
    card_last_digits: str | None = None
    card_first_digits: str | None = None
    card_brand: str | None = None
    card_pin_mode: str | None = None
    card_magstripe_fallback: bool | None = None
    cvm_pin: bool | None = None
    payment_method: str | None = None
    capture_method: str | None = None
    boleto_url: str | None = None
    boleto_barcode: str | None = None
    boleto_expiration_date: datetime | None = None
    referer: str | None = None
    ip: str | None = None
    card: Card | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def is_refused(self) -> bool:
        return self.status == "refused"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionResponse":
        values = _pick(cls, data)
        if isinstance(data.get("card"), dict):
            values["card"] = Card.from_dict(data["card"])
        else:
            values.pop("card", None)
        if not isinstance(values.get("errors"), list):
            values.pop("errors", None)
        return cls(**values)


_DATE_FIELDS = {"date_created", "date_updated", "boleto_expiration_date"}


def _pick(model: type, data: dict[str, Any]) -> dict[str, Any]:
    """Keep only keys the dataclass knows, parsing timestamps."""
    known = {f.name for f in fields(model)}
    values = {key: value for key, value in data.items() if key in known}
    for name in _DATE_FIELDS & values.keys():
        values[name] = parse_datetime(values[name])
    return values
