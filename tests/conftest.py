from __future__ import annotations

import pytest

from src.student_attendance.student_attendance.container import build_container
from src.student_attendance.student_attendance.main import create_app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "attendance.json"


@pytest.fixture
def container(data_file):
    return build_container(data_file=str(data_file), default_subject="general")


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
