"""Synthetic data generators for sandbox runs."""

from pagarme_tx.generators.base import BaseGenerator
from pagarme_tx.generators.sandbox import SandboxTransactionGenerator

__all__ = ["BaseGenerator", "SandboxTransactionGenerator"]
