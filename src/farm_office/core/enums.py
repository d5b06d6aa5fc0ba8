from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "Admin"
    OPERATOR = "Operador"


class WorkerCategory(str, Enum):
    """Worker filter for the payroll report.

    ``ALL`` is the fallthrough variant: any raw filter value that is not one of
    the named categories admits every worker.
    """

    REGISTERED = "registrados"
    UNREGISTERED = "nao_registrados"
    ALL = "todos"

    @classmethod
    def from_filter(cls, value) -> "WorkerCategory":
        try:
            return cls(value)
        except ValueError:
            return cls.ALL

    def admits(self, is_registered: bool) -> bool:
        if self is WorkerCategory.REGISTERED:
            return bool(is_registered)
        if self is WorkerCategory.UNREGISTERED:
            return not is_registered
        return True
