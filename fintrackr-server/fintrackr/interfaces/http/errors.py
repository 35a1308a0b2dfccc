"""Translate domain errors into HTTP errors."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

from fintrackr.modules.categories import CategoryAlreadyExistsError, CategoryNotFoundError
from fintrackr.modules.common import BackendError, DomainError, ValidationError
from fintrackr.modules.loans import LoanNotFoundError
from fintrackr.modules.transactions import TransactionNotFoundError
from fintrackr.modules.transfers import TransferNotFoundError
from fintrackr.modules.wallets import WalletInUseError, WalletNotFoundError

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int, str], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST, "{}"),
    (WalletNotFoundError, status.HTTP_404_NOT_FOUND, "Wallet not found: {}"),
    (TransferNotFoundError, status.HTTP_404_NOT_FOUND, "Transfer not found: {}"),
    (TransactionNotFoundError, status.HTTP_404_NOT_FOUND, "Transaction not found: {}"),
    (CategoryNotFoundError, status.HTTP_404_NOT_FOUND, "Category not found: {}"),
    (LoanNotFoundError, status.HTTP_404_NOT_FOUND, "Loan not found: {}"),
    (WalletInUseError, status.HTTP_409_CONFLICT, "Wallet is still referenced by transfers or transactions: {}"),
    (CategoryAlreadyExistsError, status.HTTP_409_CONFLICT, "{}"),
    (BackendError, status.HTTP_503_SERVICE_UNAVAILABLE, "{}"),
)


def to_http_error(exc: DomainError) -> HTTPException:
    for error_type, status_code, template in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=template.format(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@contextmanager
def domain_errors() -> Iterator[None]:
    try:
        yield
    except DomainError as exc:
        raise to_http_error(exc) from exc


__all__ = ["domain_errors", "to_http_error"]
