"""CLI adapter printing a user's realized balance.

This module wires the GetUserBalanceUseCase to the configured entry store
and provides a simple command-line entry point.
"""

import argparse

from finance_entries.infrastructure.container import build_balance_use_case
from finance_entries.infrastructure.logging.logger import get_usage_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print settled income minus settled expense for a user.",
    )
    parser.add_argument(
        "--user-id",
        type=int,
        required=True,
        help="Identifier of the entries' owner.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Compute and print the balance of the requested user."""
    args = _build_parser().parse_args(argv)
    get_usage_logger().info(f"balance_cli invoked for user {args.user_id}")
    use_case = build_balance_use_case()

    balance = use_case.execute(args.user_id)

    print(f"Balance for user {args.user_id}: {balance}")


if __name__ == "__main__":  # pragma: no cover
    main()
