"""Domain models for transaction categories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fintrackr.modules.common import UNSET

DEFAULT_COLOR = "#3B82F6"


@dataclass(slots=True)
class Category:
    id: str
    owner_id: str
    name: str
    color: str
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class CategoryCreateInput:
    name: str
    color: str = DEFAULT_COLOR


@dataclass(slots=True)
class CategoryUpdateInput:
    name: str | object = UNSET
    color: str | object = UNSET
