from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Farm:
    """Domain entity: a farm where work is carried out."""

    farm_id: Optional[int]
    name: str
    owner: Optional[str] = None
    city: Optional[str] = None
    is_active: bool = True
