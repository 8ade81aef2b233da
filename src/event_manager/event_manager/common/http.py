from __future__ import annotations

from typing import Any

from flask import jsonify, request

from ..core.exceptions import DomainError


def ok(**payload: Any):
    return jsonify({"success": True, **payload})


def fail(message: str, status_code: int, **extra: Any):
    return jsonify({"success": False, "error": message, **extra}), status_code


def error_response(error: DomainError):
    return fail(error.message, error.status_code, **error.payload)


def json_body() -> dict:
    """Request body as a dict; form posts are accepted like JSON ones."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
