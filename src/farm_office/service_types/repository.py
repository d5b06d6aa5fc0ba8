from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ServiceType


class ServiceTypeRepository(Protocol):
    def list_all(self) -> Sequence[ServiceType]:
        raise NotImplementedError

    def get_by_id(self, service_id: int) -> Optional[ServiceType]:
        raise NotImplementedError

    def create(self, service: ServiceType) -> int:
        raise NotImplementedError

    def update(self, service: ServiceType) -> None:
        raise NotImplementedError

    def delete_by_id(self, service_id: int) -> bool:
        raise NotImplementedError
