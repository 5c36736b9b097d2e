from __future__ import annotations

from flask import Flask, jsonify


def register(app: Flask) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})
