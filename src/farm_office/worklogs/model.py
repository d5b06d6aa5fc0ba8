from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class WorkLogEntry:
    """Domain entity: one worker's activity (or absence) on one day.

    ``date`` stays a ``YYYY-MM-DD`` string; entries are immutable once recorded.
    """

    date: str
    worker_name: str
    status: Optional[str] = None
    production_quantity: Optional[float] = None
    unit_price: Optional[float] = None
    details: Optional[str] = None
    farm: Optional[str] = None
    entry_id: Optional[int] = None
    created_at: Optional[datetime] = None
