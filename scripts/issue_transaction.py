#!/usr/bin/env python3
"""Issue a boleto or credit card transaction against the Pagar.me API.

Reads the gateway configuration from the environment (``PAGARME_API_KEY``,
``PAGARME_BASE_URL``, ``PAGARME_AUTH_METHOD``...).

Examples::

    python scripts/issue_transaction.py boleto --amount 20.00 \\
        --name "Leandro Greijal" --document 251.854.650-26

    python scripts/issue_transaction.py card --amount 2.00 \\
        --name "Leandro Greijal" --document 251.854.650-26 \\
        --card-number 4111111111111111 --card-holder Leandro \\
        --card-expiration 1028 --card-cvv 123 --auth basic_auth

    python scripts/issue_transaction.py sandbox --count 3 --seed 42
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pagarme_tx.builder import TransactionBuilder
from pagarme_tx.client import GatewayClient
from pagarme_tx.config import GatewayConfig
from pagarme_tx.exceptions import PagarmeError
from pagarme_tx.generators import SandboxTransactionGenerator
from pagarme_tx.logging import get_logger, setup_logging
from pagarme_tx.models.enums import AuthenticationMethod, PaymentMethod
from pagarme_tx.models.gateway import TransactionResponse
from pagarme_tx.models.transaction import Transaction

logger = get_logger(__name__)


def build_transaction(args: argparse.Namespace, api_key: str) -> Transaction:
    """Validate command line values into a transaction."""
    builder = (
        TransactionBuilder(api_key)
        .amount(args.amount)
        .name(args.name)
        .country(args.country)
        .document(args.document)
    )
    if args.command == "card":
        (
            builder.payment_method(PaymentMethod.CREDIT_CARD)
            .card_number(args.card_number)
            .card_holder_name(args.card_holder)
            .card_expiration_date(args.card_expiration)
            .card_cvv(args.card_cvv)
        )
    else:
        builder.payment_method(PaymentMethod.BOLETO)
    return builder.build()


def report(result: TransactionResponse) -> None:
    """Print the outcome of one transaction."""
    print(f"Transaction {result.id}: {result.status}")
    if result.is_refused:
        print(f"  refuse reason: {result.refuse_reason or result.status_reason}")
    if result.boleto_url:
        print(f"  boleto: {result.boleto_url}")
        print(f"  barcode: {result.boleto_barcode}")
    for error in result.errors:
        print(f"  error: {error.get('parameter_name')}: {error.get('message')}")


def add_customer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--amount", type=str, required=True, help="Amount in BRL, e.g. 20.00")
    parser.add_argument("--name", type=str, required=True, help="Customer name")
    parser.add_argument("--document", type=str, required=True, help="Formatted CPF or CNPJ")
    parser.add_argument("--country", type=str, default="BR", help="Country code (default: BR)")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Issue Pagar.me transactions")
    parser.add_argument(
        "--auth",
        type=str,
        choices=[method.value for method in AuthenticationMethod],
        default=None,
        help="Where to send the API key (default: PAGARME_AUTH_METHOD or body)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["standard", "json"],
        default="standard",
        help="Log output format",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    boleto = subparsers.add_parser("boleto", help="Issue a boleto")
    add_customer_arguments(boleto)

    card = subparsers.add_parser("card", help="Charge a credit card")
    add_customer_arguments(card)
    card.add_argument("--card-number", type=str, required=True)
    card.add_argument("--card-holder", type=str, required=True)
    card.add_argument("--card-expiration", type=str, required=True, help="MMYY")
    card.add_argument("--card-cvv", type=str, required=True)

    sandbox = subparsers.add_parser("sandbox", help="Issue generated transactions")
    sandbox.add_argument("--count", type=int, default=1, help="Number of transactions")
    sandbox.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    try:
        config = GatewayConfig.from_env()
        setup_logging(config.log_level, args.log_format)
        auth_method = AuthenticationMethod(args.auth) if args.auth else config.auth_method
        client = GatewayClient(config)

        if args.command == "sandbox":
            generator = SandboxTransactionGenerator(api_key=config.api_key, seed=args.seed)
            transactions = list(generator.generate_batch(args.count))
        else:
            transactions = [build_transaction(args, config.api_key)]

        for transaction in transactions:
            report(client.submit(transaction, auth_method))
    except PagarmeError as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
