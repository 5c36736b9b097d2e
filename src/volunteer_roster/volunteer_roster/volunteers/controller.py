from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import error_response
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/names", methods=["GET"], endpoint="api_names")
    def api_names():
        try:
            rows = container.volunteer_service.list_volunteers(
                search=request.args.get("search"),
                school=request.args.get("school"),
                grade=request.args.get("grade"),
                location=request.args.get("location"),
                sort=request.args.get("sort"),
            )
        except Exception as e:
            return error_response(e, logger=logger, generic="Failed to fetch names")
        return jsonify([v.to_dict() for v in rows])

    @app.route("/api/names/filters", methods=["GET"], endpoint="api_names_filters")
    def api_names_filters():
        try:
            options = container.volunteer_service.filter_options()
        except Exception as e:
            return error_response(e, logger=logger, generic="Failed to fetch filters")
        return jsonify(options)

    @app.route("/api/overview", methods=["GET"], endpoint="api_overview")
    def api_overview():
        """Headline numbers for the dashboard hero: roster plus attendance log."""
        try:
            data = container.volunteer_service.overview()
            data.update(container.attendance_service.summary())
        except Exception as e:
            return error_response(e, logger=logger, generic="Failed to build overview")
        return jsonify(data)
