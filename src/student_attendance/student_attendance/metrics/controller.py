from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _subject():
        return (request.args.get("subject") or "").strip() or None

    @app.route("/api/metrics", methods=["GET"], endpoint="metrics_overview")
    def metrics_overview():
        return jsonify(container.metrics_service.overview(subject=_subject()))

    @app.route("/api/metrics/students", methods=["GET"], endpoint="metrics_students")
    def metrics_students():
        return jsonify(container.metrics_service.student_rows(subject=_subject()))

    @app.route("/api/rankings", methods=["GET"], endpoint="rankings")
    def rankings():
        return jsonify(container.metrics_service.rankings(subject=_subject()))
