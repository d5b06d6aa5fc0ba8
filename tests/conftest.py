from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from farm_office import create_app
from farm_office.container import wire
from farm_office.core.enums import Role
from farm_office.users.model import User


class InMemoryStore:
    """Dict-backed repository keyed by an id attribute (farms, services, workers)."""

    def __init__(self, id_attr: str):
        self._id_attr = id_attr
        self._rows: dict[int, object] = {}
        self._next_id = 1

    def list_all(self):
        return list(self._rows.values())

    def get_by_id(self, row_id: int):
        return self._rows.get(int(row_id))

    def create(self, row) -> int:
        row_id = self._next_id
        self._next_id += 1
        self._rows[row_id] = replace(row, **{self._id_attr: row_id})
        return row_id

    def update(self, row) -> None:
        self._rows[getattr(row, self._id_attr)] = row

    def delete_by_id(self, row_id: int) -> bool:
        return self._rows.pop(int(row_id), None) is not None


class InMemoryWorkers(InMemoryStore):
    def __init__(self):
        super().__init__("worker_id")

    def list_workers(self):
        return super().list_all()

    def list_all(self):
        return [w.profile() for w in super().list_all()]


class InMemoryWorkLogs:
    def __init__(self, entries=None):
        self.entries = list(entries or [])
        self.last_range = None

    def add_many(self, entries):
        saved = []
        for e in entries:
            saved.append(replace(e, entry_id=len(self.entries) + 1, created_at=datetime(2025, 8, 1, 12, 0)))
            self.entries.append(saved[-1])
        return saved

    def find_in_range(self, start_date: str, end_date: str):
        self.last_range = (start_date, end_date)
        return [e for e in self.entries if start_date <= e.date <= end_date]

    def find_by_month(self, year: int, month: int):
        prefix = f"{year:04d}-{month:02d}-"
        return [e for e in self.entries if e.date.startswith(prefix)]


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_login(self, login: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.login == login), None)

    def list_all(self):
        return list(self._by_id.values())

    def create_user(self, *, name, login, password_hash, role) -> int:
        user_id = self._next_id
        self._next_id += 1
        self._by_id[user_id] = User(user_id=user_id, name=name, login=login, password_hash=password_hash, role=role)
        return user_id

    def delete_by_id(self, user_id: int) -> bool:
        return self._by_id.pop(int(user_id), None) is not None


@pytest.fixture
def container():
    users = InMemoryUsers()
    users.create_user(name="Admin", login="admin", password_hash=generate_password_hash("admin123"), role=Role.ADMIN)
    users.create_user(name="Operador", login="op", password_hash=generate_password_hash("op1234"), role=Role.OPERATOR)
    return wire(
        users_repo=users,
        farms_repo=InMemoryStore("farm_id"),
        service_types_repo=InMemoryStore("service_id"),
        workers_repo=InMemoryWorkers(),
        work_logs_repo=InMemoryWorkLogs(),
    )


@pytest.fixture
def app(container):
    return create_app(settings_module="farm_office.settings.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def _login_as(client, *, user_id: int, name: str, role: Role):
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["name"] = name
        sess["role"] = role.value
    return client


@pytest.fixture
def admin_client(client):
    return _login_as(client, user_id=1, name="Admin", role=Role.ADMIN)


@pytest.fixture
def operator_client(app):
    return _login_as(app.test_client(), user_id=2, name="Operador", role=Role.OPERATOR)
