"""Enumeration types for gateway transactions."""

from enum import Enum


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    BOLETO = "boleto"


class CustomerType(str, Enum):
    INDIVIDUAL = "individual"
    CORPORATION = "corporation"

    @classmethod
    def from_value(cls, value: str) -> "CustomerType":
        """Parse a free-form label, defaulting to ``INDIVIDUAL``."""
        if value.lower() == cls.CORPORATION.value:
            return cls.CORPORATION
        return cls.INDIVIDUAL


class DocumentType(str, Enum):
    CPF = "cpf"
    CNPJ = "cnpj"


class AuthenticationMethod(str, Enum):
    """Where the API key travels on a transaction request."""

    BODY = "body"
    PARAM = "param"
    BASIC_AUTH = "basic_auth"
