"""Building blocks shared by every finance module."""

from .exceptions import BackendError, DomainError, ValidationError, backend_errors
from .models import UNSET, resolve
from .money import CENT, MAX_AMOUNT, to_money

__all__ = [
    "BackendError",
    "CENT",
    "DomainError",
    "MAX_AMOUNT",
    "UNSET",
    "ValidationError",
    "backend_errors",
    "resolve",
    "to_money",
]
