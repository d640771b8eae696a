from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotConfiguredError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (StoreError, 500),
    (NotConfiguredError, 500),
)


def error_response(exc: DomainError):
    """JSON `{"error": ...}` response with the status matching the exception type."""
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return jsonify({"error": str(exc)}), status
    return jsonify({"error": str(exc) or "Server error"}), 500


def server_error(context: str):
    logger.exception("Unhandled error in %s", context)
    return jsonify({"error": "Server error"}), 500


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Authentication required"}), 401

        if session.get("role") != Role.ADMIN.value:
            return jsonify({"error": "Admin access required"}), 403

        return view(*args, **kwargs)

    return wrapper
