from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import DuplicateKeyError, NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        return jsonify([s.to_dict() for s in container.roster_service.list_students()])

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    def add_student():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _error("Roll No and Name are required", 400)

        try:
            student = container.roster_service.add_student(
                roll_no=data.get("roll_no"),
                name=data.get("name"),
                course=data.get("course"),
            )
        except (ValidationError, DuplicateKeyError) as e:
            return _error(str(e), 400)
        except PersistenceError:
            return _error("Failed to save student data", 500)
        except Exception:
            logger.exception("Unexpected error while adding a student")
            return _error("Internal error while adding student", 500)

        return jsonify(student.to_dict()), 201

    @app.route("/api/students/<roll_no>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(roll_no: str):
        try:
            container.roster_service.remove_student(roll_no=roll_no)
        except NotFoundError as e:
            return _error(str(e), 404)
        except PersistenceError:
            return _error("Failed to save student data after deletion", 500)
        except Exception:
            logger.exception("Unexpected error while deleting student %s", roll_no)
            return _error("Internal error while deleting student", 500)

        return jsonify({"success": True, "message": f"Student {roll_no} deleted"})
