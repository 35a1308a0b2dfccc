"""Wallet domain specific exceptions."""

from fintrackr.modules.common import DomainError


class WalletError(DomainError):
    """Base class for wallet domain errors."""


class WalletNotFoundError(WalletError):
    """Raised when the wallet does not exist or is not visible to the owner."""


class WalletInUseError(WalletError):
    """Raised when deleting a wallet that transfers or transactions still reference."""
