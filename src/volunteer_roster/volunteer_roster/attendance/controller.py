from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request

from ..auth.verifier import bearer_token
from ..common.responses import error_response
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def identity_required(view):
        """Require a verified bearer ID token when a client id is configured."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            verifier = container.token_verifier
            if verifier.enabled:
                try:
                    g.identity = verifier.verify(bearer_token(request.headers.get("Authorization")))
                except Exception as e:
                    return error_response(e, logger=logger, generic="Failed to verify identity")
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance")
    @identity_required
    def api_attendance():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Expected a JSON object"}), 400

        try:
            container.attendance_service.record(payload)
        except Exception as e:
            return error_response(e, logger=logger, generic="Failed to save attendance")
        return jsonify({"ok": True})

    @app.route("/api/evidencija", methods=["GET"], endpoint="api_evidencija")
    def api_evidencija():
        try:
            rows = container.attendance_service.list_entries(
                location=request.args.get("location"),
                year=request.args.get("year"),
            )
        except Exception as e:
            return error_response(e, logger=logger, generic="Failed to fetch attendance")
        return jsonify([e.to_dict() for e in rows])
