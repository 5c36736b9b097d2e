from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    UpstreamError,
    ValidationError,
)


def error_response(exc: Exception, *, logger: logging.Logger, generic: str):
    """Map an exception raised by a use case to a JSON error body and status."""
    if isinstance(exc, ValidationError):
        logger.warning("Validation failed: %s", exc)
        return jsonify({"error": str(exc)}), 400
    if isinstance(exc, AuthenticationError):
        logger.warning("Unauthorized: %s", exc)
        return jsonify({"error": str(exc)}), 401
    if isinstance(exc, AuthorizationError):
        logger.warning("Forbidden: %s", exc)
        return jsonify({"error": str(exc)}), 403
    if isinstance(exc, (ConfigurationError, UpstreamError)):
        logger.error("%s: %s", generic, exc, exc_info=exc)
        return jsonify({"error": generic}), 500

    logger.error("%s (unexpected): %s", generic, exc, exc_info=exc)
    return jsonify({"error": generic}), 500
