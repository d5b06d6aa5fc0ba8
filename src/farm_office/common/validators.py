from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} deve ter no mínimo {min_len} caracteres")
    return value


def require_number(value, field_name: str) -> float:
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise ValidationError(f"{field_name} é obrigatório")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser numérico")


def optional_number(value, field_name: str) -> Optional[float]:
    if value is None or str(value).strip() == "":
        return None
    return require_number(value, field_name)


def require_non_negative_int(value, field_name: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    if n < 0:
        raise ValidationError(f"{field_name} não pode ser negativo")
    return n


def optional_text(value) -> Optional[str]:
    v = str(value).strip() if value is not None else ""
    return v or None


_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


def require_bool(value, field_name: str, *, default: Optional[bool] = None) -> bool:
    """Accept real booleans, 0/1 and the strings "true"/"false"/"1"/"0".

    ``None`` falls back to ``default`` when one is given.
    """
    if value is None and default is not None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE_VALUES:
            return True
        if v in _FALSE_VALUES:
            return False
    raise ValidationError(f"{field_name} deve ser verdadeiro ou falso")
