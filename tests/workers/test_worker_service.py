from __future__ import annotations

from datetime import date

import pytest

from farm_office.core.exceptions import NotFoundError, ValidationError
from farm_office.workers.model import Worker, WorkerProfile
from farm_office.workers.service import WorkerService

from conftest import InMemoryWorkers


def test_create_worker_with_defaults():
    repo = InMemoryWorkers()
    svc = WorkerService(repo)

    worker = svc.create(name="Ana")

    assert worker.worker_id == 1
    assert worker.is_active and not worker.is_registered
    assert worker.number_of_dependents == 0
    assert repo.list_all() == [WorkerProfile(name="Ana", is_registered=False, number_of_dependents=0)]


def test_create_worker_parses_registration_timestamp():
    worker = WorkerService(InMemoryWorkers()).create(
        name="Ana", is_registered=True, registration_date="2025-03-10T00:00:00.000Z", number_of_dependents="2"
    )

    assert worker.registration_date == date(2025, 3, 10)
    assert worker.number_of_dependents == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": " "},
        {"name": "Ana", "number_of_dependents": -1},
        {"name": "Ana", "number_of_dependents": "dois"},
        {"name": "Ana", "registration_date": "10/03/2025"},
        {"name": "Ana", "number_of_dependents": 2.7},
        {"name": "Ana", "number_of_dependents": True},
        {"name": "Ana", "is_registered": "yes"},
    ],
)
def test_create_worker_validates(kwargs):
    with pytest.raises(ValidationError):
        WorkerService(InMemoryWorkers()).create(**kwargs)


def test_update_changes_registration():
    svc = WorkerService(InMemoryWorkers())
    worker = svc.create(name="Ana")

    updated = svc.update(worker.worker_id, is_registered=True, number_of_dependents=3)

    assert updated == Worker(worker_id=1, name="Ana", is_registered=True, number_of_dependents=3)
    assert svc.get(1).is_registered


def test_update_and_delete_missing_worker():
    svc = WorkerService(InMemoryWorkers())

    with pytest.raises(NotFoundError):
        svc.update(99, name="X")
    with pytest.raises(NotFoundError):
        svc.delete(99)


def test_delete_returns_removed_worker():
    svc = WorkerService(InMemoryWorkers())
    worker = svc.create(name="Ana")

    assert svc.delete(worker.worker_id).name == "Ana"
    assert svc.list_all() == []


def test_flags_and_dependents_from_strings():
    svc = WorkerService(InMemoryWorkers())
    worker = svc.create(name="Ana", is_registered="true", is_active="0", number_of_dependents=2.0)

    assert worker.is_registered is True
    assert worker.is_active is False
    assert worker.number_of_dependents == 2

    assert svc.update(worker.worker_id, is_registered="false").is_registered is False
    assert svc.update(worker.worker_id, is_registered=None).is_registered is False
