from typing import Any, Dict, Optional

from flask import jsonify

from .errors import APIError


def make_ok(data: Optional[Any] = None, message: str = "success", status_code: int = 200):
    """Return a standardized success response."""
    payload = {
        "status": "ok",
        "message": message,
        "data": data,
    }
    return jsonify(payload), status_code


def make_error(error: Any, message: str = "An error occurred", status_code: int = 400):
    """Return a standardized error response."""
    if isinstance(error, APIError):
        error = error.to_dict()

    payload: Dict[str, Any] = {
        "status": "error",
        "message": message,
        "error": error,
    }
    return jsonify(payload), status_code
