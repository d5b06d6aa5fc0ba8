from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from farm_office.core.enums import Role
from farm_office.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from farm_office.users.model import User
from farm_office.users.service import AuthService, UserService

from conftest import InMemoryUsers


@pytest.fixture
def users():
    return InMemoryUsers()


def test_create_user_hashes_password(users):
    user = UserService(users).create_user(name="Maria", login="maria", password="segredo1")

    assert user.role == Role.OPERATOR
    stored = users.get_by_login("maria")
    assert stored.password_hash != "segredo1"
    assert check_password_hash(stored.password_hash, "segredo1")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "login": "x", "password": "segredo1"},
        {"name": "X", "login": "x", "password": "123"},
        {"name": "X", "login": "x", "password": "segredo1", "role": "Gerente"},
    ],
)
def test_create_user_validates(users, kwargs):
    with pytest.raises(ValidationError):
        UserService(users).create_user(**kwargs)


def test_create_user_rejects_duplicate_login(users):
    svc = UserService(users)
    svc.create_user(name="Maria", login="maria", password="segredo1")

    with pytest.raises(ValidationError):
        svc.create_user(name="Outra", login="maria", password="segredo2", role="Admin")


def test_authenticate(users):
    UserService(users).create_user(name="Maria", login="maria", password="segredo1", role="Admin")
    auth = AuthService(users)

    s_user = auth.authenticate("maria", "segredo1")
    assert s_user.name == "Maria"
    assert s_user.role == Role.ADMIN

    with pytest.raises(AuthenticationError):
        auth.authenticate("maria", "errada")
    with pytest.raises(AuthenticationError):
        auth.authenticate("ninguem", "segredo1")


def test_authenticate_with_corrupted_hash(users):
    users.create_user(name="Velho", login="velho", password_hash="CHANGE_ME", role=Role.OPERATOR)

    with pytest.raises(AuthenticationError):
        AuthService(users).authenticate("velho", "CHANGE_ME")


def test_delete_user_rules(users):
    svc = UserService(users)
    admin = svc.create_user(name="Admin", login="admin", password="admin123", role="Admin")
    op = svc.create_user(name="Op", login="op", password="op12345")

    with pytest.raises(ValidationError):
        svc.delete_user(current_user_id=admin.user_id, user_id=admin.user_id)
    with pytest.raises(NotFoundError):
        svc.delete_user(current_user_id=admin.user_id, user_id=99)

    assert svc.delete_user(current_user_id=admin.user_id, user_id=op.user_id).login == "op"
    assert [u.login for u in svc.list_users()] == ["admin"]
