from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any

from flask import Flask, jsonify, request

from ..core.exceptions import ConflictError, NotFoundError, TransportError, ValidationError
from .validators import parse_bool

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {_plain(k): _plain(v) for k, v in value.items()}
    return value


def to_dict(obj: Any) -> Any:
    """Dataclass (or list of them) -> JSON-ready structure with enum values."""
    if isinstance(obj, (list, tuple)):
        return [to_dict(o) for o in obj]
    return _plain(dataclasses.asdict(obj))


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_confirmation() -> None:
    if not parse_bool(request.args.get("confirm", "")):
        raise ValidationError("Deletion must be confirmed", {"confirm": "Pass confirm=true to delete"})


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"error": str(e), "errors": e.errors}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(ConflictError)
    def _conflict(e: ConflictError):
        return jsonify({"error": str(e)}), 409

    @app.errorhandler(TransportError)
    def _transport(e: TransportError):
        logger.error("Storage failure on %s %s: %s", request.method, request.path, e)
        return jsonify({"error": "The request could not be completed. Please try again."}), 502
