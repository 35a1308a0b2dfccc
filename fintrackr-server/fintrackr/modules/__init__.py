"""Finance modules and their shared building blocks."""

from . import categories, common, loans, reports, transactions, transfers, wallets

__all__ = [
    "categories",
    "common",
    "loans",
    "reports",
    "transactions",
    "transfers",
    "wallets",
]
