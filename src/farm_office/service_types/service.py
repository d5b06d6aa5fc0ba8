from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.validators import require_bool, require_non_empty, require_number
from ..core.exceptions import NotFoundError, ValidationError
from .model import ServiceType
from .repository import ServiceTypeRepository


class ServiceTypeService:
    def __init__(self, services: ServiceTypeRepository):
        self._services = services

    @staticmethod
    def _price(value) -> float:
        price = require_number(value, "Preço")
        if price < 0:
            raise ValidationError("Preço não pode ser negativo")
        return price

    def list_all(self) -> Sequence[ServiceType]:
        return self._services.list_all()

    def get(self, service_id: int) -> ServiceType:
        service = self._services.get_by_id(int(service_id))
        if not service:
            raise NotFoundError("Serviço não encontrado")
        return service

    def create(self, *, name: str, price, is_active: bool = True) -> ServiceType:
        service = ServiceType(
            service_id=None,
            name=require_non_empty(name, "Nome do serviço"),
            price=self._price(price),
            is_active=require_bool(is_active, "Ativo", default=True),
        )
        return replace(service, service_id=self._services.create(service))

    def update(self, service_id: int, **changes) -> ServiceType:
        service = self.get(service_id)
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Nome do serviço")
        if "price" in changes:
            changes["price"] = self._price(changes["price"])
        if "is_active" in changes:
            changes["is_active"] = require_bool(changes["is_active"], "Ativo", default=service.is_active)

        updated = replace(service, **changes)
        self._services.update(updated)
        return updated

    def delete(self, service_id: int) -> ServiceType:
        service = self.get(service_id)
        self._services.delete_by_id(int(service_id))
        return service
