from __future__ import annotations

import pytest

from farm_office.core.exceptions import NotFoundError, ValidationError
from farm_office.farms.service import FarmService
from farm_office.service_types.service import ServiceTypeService

from conftest import InMemoryStore


def test_farm_crud():
    svc = FarmService(InMemoryStore("farm_id"))

    farm = svc.create(name="Fazenda Boa Vista", owner=" ", city="Franca")
    assert farm.farm_id == 1
    assert farm.owner is None

    updated = svc.update(farm.farm_id, city="Patrocínio", is_active=False)
    assert updated.city == "Patrocínio"
    assert not updated.is_active
    assert svc.list_all() == [updated]

    assert svc.delete(farm.farm_id) == updated
    assert svc.list_all() == []


def test_farm_requires_name():
    svc = FarmService(InMemoryStore("farm_id"))

    with pytest.raises(ValidationError):
        svc.create(name="")
    farm = svc.create(name="Santa Rita")
    with pytest.raises(ValidationError):
        svc.update(farm.farm_id, name="   ")


def test_farm_missing_id():
    with pytest.raises(NotFoundError):
        FarmService(InMemoryStore("farm_id")).delete(5)


def test_service_type_price_is_required_and_numeric():
    svc = ServiceTypeService(InMemoryStore("service_id"))

    assert svc.create(name="Colheita", price="12.5").price == 12.5
    with pytest.raises(ValidationError):
        svc.create(name="Capina", price=None)
    with pytest.raises(ValidationError):
        svc.create(name="Capina", price="caro")
    with pytest.raises(ValidationError):
        svc.create(name="Capina", price=-1)


def test_service_type_update():
    svc = ServiceTypeService(InMemoryStore("service_id"))
    service = svc.create(name="Colheita", price=10)

    assert svc.update(service.service_id, price=11).price == 11.0
    with pytest.raises(NotFoundError):
        svc.update(42, price=1)


def test_active_flag_parses_strings():
    farms = FarmService(InMemoryStore("farm_id"))
    farm = farms.create(name="Boa Vista", is_active="false")
    assert farm.is_active is False
    assert farms.update(farm.farm_id, is_active="1").is_active is True

    services = ServiceTypeService(InMemoryStore("service_id"))
    service = services.create(name="Colheita", price=10, is_active="0")
    assert service.is_active is False
    with pytest.raises(ValidationError):
        services.update(service.service_id, is_active="talvez")
