"""Shared fixtures: an application backed by a temporary store and uploads root."""

from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

from student_records.core.config import Settings
from student_records.main import create_application

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        STORE_URL=f"sqlite:///{tmp_path / 'students.db'}",
        UPLOADS_ROOT=str(tmp_path / "Marksheets"),
    )


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(client, app):
    """Store gateway of a started application (tables created)."""
    return app.state.store


@pytest.fixture
def uploads_root(settings):
    return settings.uploads_path


def make_workbook(*rows) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Marks"
    ws.append(["Subject", "Marks"])
    for row in rows:
        ws.append(list(row))
    output = BytesIO()
    wb.save(output)
    return output.getvalue()


@pytest.fixture
def xlsx_bytes() -> bytes:
    return make_workbook(("Mathematics", 91), ("Physics", 84))


def create_student(client, first_name="Asha", last_name="Rao", **extra) -> dict:
    response = client.post("/students", json={"firstName": first_name, "lastName": last_name, **extra})
    assert response.status_code == 200, response.text
    return response.json()["student"]
