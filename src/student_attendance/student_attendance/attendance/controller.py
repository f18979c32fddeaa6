from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, Response, jsonify, render_template, request

from ..container import Container
from ..core.exceptions import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _text_error(message: str, status: int) -> Response:
        return Response(message, status=status, mimetype="text/plain")

    def _bucket_label(subject: Optional[str], date: str) -> str:
        return f"{subject}/{date}" if subject else date

    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        return jsonify(container.attendance_service.list_subjects())

    @app.route("/api/attendance", methods=["GET"], endpoint="all_attendance")
    def all_attendance():
        return jsonify(container.attendance_service.get_all())

    @app.route("/api/attendance/dates", methods=["GET"], endpoint="attendance_dates")
    def attendance_dates():
        subject = (request.args.get("subject") or "").strip() or None
        return jsonify(container.attendance_service.list_dates(subject=subject))

    @app.route("/api/attendance/<date>", methods=["GET"], defaults={"subject": None}, endpoint="get_attendance")
    @app.route("/api/attendance/<subject>/<date>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(date: str, subject: Optional[str]):
        try:
            entries = container.attendance_service.get_attendance(date, subject=subject)
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify([e.to_dict() for e in entries])

    @app.route("/api/attendance/<date>", methods=["POST"], defaults={"subject": None}, endpoint="save_attendance")
    @app.route("/api/attendance/<subject>/<date>", methods=["POST"], endpoint="save_attendance")
    def save_attendance(date: str, subject: Optional[str]):
        try:
            container.attendance_service.set_attendance(date, request.get_json(silent=True), subject=subject)
        except ValidationError as e:
            return _error(str(e), 400)
        except PersistenceError:
            return _error("Failed to save attendance data.", 500)
        except Exception:
            logger.exception("Unexpected error while saving attendance for %s", _bucket_label(subject, date))
            return _error("Internal error while saving attendance.", 500)

        return jsonify({"success": True, "message": f"Attendance for {_bucket_label(subject, date)} saved successfully."})

    @app.route("/admin/print/<date>", methods=["GET"], defaults={"subject": None}, endpoint="print_attendance")
    @app.route("/admin/print/<subject>/<date>", methods=["GET"], endpoint="print_attendance")
    def print_attendance(date: str, subject: Optional[str]):
        """Printable attendance sheet for one bucket (no auth, like the rest of /admin)."""
        try:
            entries = container.attendance_service.get_attendance(date, subject=subject)
            html = render_template(
                "admin/print_attendance.html",
                subject=subject or container.attendance_service.default_subject,
                date=date,
                entries=entries,
                present=sum(1 for e in entries if e.is_present),
                absent=sum(1 for e in entries if not e.is_present),
            )
        except ValidationError as e:
            return _text_error(str(e), 400)
        except Exception:
            logger.exception("Failed to render attendance sheet for %s", _bucket_label(subject, date))
            return _text_error("Failed to render attendance sheet", 500)

        return Response(html, status=200, mimetype="text/html")
