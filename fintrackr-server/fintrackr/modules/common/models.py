"""Helpers for partial updates."""

from __future__ import annotations

from typing import Any

# Sentinel used to differentiate between "not provided" and explicit None.
UNSET: Any = object()


def resolve(value: Any, current: Any) -> Any:
    return current if value is UNSET else value
