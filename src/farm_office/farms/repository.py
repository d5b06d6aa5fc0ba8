from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Farm


class FarmRepository(Protocol):
    def list_all(self) -> Sequence[Farm]:
        raise NotImplementedError

    def get_by_id(self, farm_id: int) -> Optional[Farm]:
        raise NotImplementedError

    def create(self, farm: Farm) -> int:
        raise NotImplementedError

    def update(self, farm: Farm) -> None:
        raise NotImplementedError

    def delete_by_id(self, farm_id: int) -> bool:
        raise NotImplementedError
