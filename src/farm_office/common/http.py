"""Shared helpers for the JSON controllers.

Controllers stay thin: parse the request, call a service, serialize the result.
Domain errors raised by services are turned into JSON error responses here.
"""
from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Faça login para continuar.", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Faça login para continuar.", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("Acesso restrito a administradores.", 403)
        return view(*args, **kwargs)

    return wrapper


def json_errors(view):
    """Map domain exceptions raised inside a view to JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthenticationError as e:
            return fail(str(e), 401)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return fail("Erro interno do servidor.", 500)

    return wrapper


def pick(payload: dict, fields: dict[str, str]) -> dict:
    """Translate API field names into service keyword arguments.

    Only keys present in ``payload`` are returned, so partial updates stay partial.
    """
    return {attr: payload[key] for key, attr in fields.items() if key in payload}
