from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.responses import error_response
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/statistika", methods=["GET"], endpoint="api_statistika")
    def api_statistika():
        try:
            data = container.statistics_service.get_statistics()
        except Exception as e:
            return error_response(e, logger=logger, generic="Failed to load statistics")
        return jsonify(data)
