from __future__ import annotations

from functools import wraps

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_view(view):
    """Translate domain errors raised by services into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except ValidationError as e:
            return json_error(str(e), 400)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
