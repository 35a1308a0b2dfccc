"""Wallet domain exports"""

from .exceptions import WalletError, WalletInUseError, WalletNotFoundError
from .models import CurrencyTotal, Wallet, WalletCreateInput, WalletUpdateInput
from .service import WalletService

__all__ = [
    "CurrencyTotal",
    "Wallet",
    "WalletCreateInput",
    "WalletError",
    "WalletInUseError",
    "WalletNotFoundError",
    "WalletService",
    "WalletUpdateInput",
]
