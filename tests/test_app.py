from fastapi.testclient import TestClient

from student_records.core.config import Settings
from student_records.main import create_application


def test_banner(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Student API running. Try GET /students"


def test_health(client, settings):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


def test_uploads_health(client, uploads_root):
    response = client.get("/health/uploads")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "path": str(uploads_root)}
    assert uploads_root.is_dir()


def test_uploads_health_creates_missing_folder(client, uploads_root):
    uploads_root.rmdir()

    response = client.get("/health/uploads")
    assert response.status_code == 200
    assert uploads_root.is_dir()


def test_uploads_health_failure(tmp_path):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("file in the way")
    app = create_application(
        Settings(_env_file=None, STORE_URL=f"sqlite:///{tmp_path / 's.db'}", UPLOADS_ROOT=str(blocker))
    )

    # Without the lifespan, which would fail on the same folder
    response = TestClient(app).get("/health/uploads")
    assert response.status_code == 500
    body = response.json()
    assert body["ok"] is False
    assert body["error"]


def test_unknown_route(client):
    response = client.get("/teachers")
    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": {
            "code": "NOT_FOUND",
            "message": "Route not found",
            "details": {"identifier": "/teachers"},
        },
    }


def test_unsupported_method_is_not_found(client):
    response = client.delete("/students")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
    assert response.json()["error"]["details"] == {"identifier": "/students"}


def test_write_to_marksheets_is_not_found(client):
    response = client.post("/marksheets/1/x.xlsx")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_request_id_header(client):
    response = client.get("/students")
    assert response.headers["X-Request-ID"]
    assert response.headers["X-Request-ID"] != client.get("/students").headers["X-Request-ID"]


def test_tables_created_on_startup(client, store):
    assert store.execute("SELECT COUNT(*) AS total FROM Students") == [{"total": 0}]


def test_inline_literal_mode_end_to_end(tmp_path, xlsx_bytes):
    settings = Settings(
        _env_file=None,
        STORE_URL=f"sqlite:///{tmp_path / 'inline.db'}",
        UPLOADS_ROOT=str(tmp_path / "Marksheets"),
        STORE_INLINE_LITERALS=True,
    )
    with TestClient(create_application(settings)) as client:
        created = client.post("/students", json={"firstName": "D'Souza", "lastName": "O'Brien"})
        assert created.status_code == 200
        roll = created.json()["student"]["RollNumber"]

        uploaded = client.post(
            f"/upload/{roll}",
            files={"file": ("it's marks.xlsx", xlsx_bytes, "application/vnd.ms-excel")},
        )
        assert uploaded.status_code == 200

        assert client.get("/students").json() == [
            {
                "RollNumber": roll,
                "FirstName": "D'Souza",
                "LastName": "O'Brien",
                "MarksFilePath": f"/Marksheets/{roll}/it_s_marks.xlsx",
            }
        ]
