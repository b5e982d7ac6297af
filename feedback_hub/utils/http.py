from typing import Any, Dict, Optional
from flask import request, jsonify

def ok(payload: Dict[str, Any], status: int = 200):
    body: Dict[str, Any] = {"success": True}
    body.update(payload)
    return jsonify(body), status


def error(message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"success": False, "message": message}
    if extra:
        body.update(extra)
    return jsonify(body), status


def respond(result):
    """Turn a service result (status, envelope) into a Flask response."""
    return jsonify(result.body), result.status


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    return val
