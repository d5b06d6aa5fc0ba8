from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, login: str, password: str) -> SessionUser:
        user = self._users.get_by_login(str(login or "").strip())
        if not user:
            raise AuthenticationError("Login ou senha inválidos")

        try:
            ok = check_password_hash(user.password_hash, str(password or ""))
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Login ou senha inválidos")

        return SessionUser(user_id=int(user.user_id), name=user.name, role=user.role)


class UserService:
    """Use case: manage back-office accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_user(self, *, name: str, login: str, password: str, role: str = Role.OPERATOR.value) -> User:
        name = require_non_empty(name, "Nome")
        login = require_non_empty(login, "Login")
        require_min_length(password, "Senha", MIN_PASSWORD_LENGTH)

        try:
            role_e = Role(role or Role.OPERATOR.value)
        except ValueError:
            raise ValidationError("Tipo de usuário inválido")

        if self._users.get_by_login(login):
            raise ValidationError("Login já está em uso")

        password_hash = generate_password_hash(password)
        user_id = self._users.create_user(name=name, login=login, password_hash=password_hash, role=role_e)
        return User(user_id=user_id, name=name, login=login, password_hash=password_hash, role=role_e)

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def delete_user(self, *, current_user_id: int, user_id: int) -> User:
        if int(current_user_id) == int(user_id):
            raise ValidationError("Não é possível excluir o próprio usuário")

        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("Usuário não encontrado")

        self._users.delete_by_id(int(user_id))
        return user
