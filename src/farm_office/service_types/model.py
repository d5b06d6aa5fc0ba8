from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ServiceType:
    """Domain entity: a kind of paid field service (harvest, weeding, ...) and its price."""

    service_id: Optional[int]
    name: str
    price: float
    is_active: bool = True
