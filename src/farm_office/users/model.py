from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a back-office account.

    Plain data object (no DB access code).
    """

    user_id: Optional[int]
    name: str
    login: str
    password_hash: str
    role: Role = Role.OPERATOR
