from pathlib import Path

from student_records.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("STORE_URL", "PORT", "UPLOADS_ROOT", "MAX_UPLOAD_SIZE_MB"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.STORE_URL == "sqlite:///./students.db"
    assert settings.PORT == 5000
    assert settings.UPLOADS_ROOT == "Marksheets"
    assert settings.MARKSHEETS_URL_PREFIX == "/marksheets"
    assert settings.STORE_POOLING is False
    assert settings.STORE_INLINE_LITERALS is False
    assert settings.max_upload_size_bytes == 5 * 1024 * 1024
    assert settings.uploads_folder_name == "Marksheets"
    assert settings.uploads_path == Path("Marksheets").resolve()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STORE_URL", "sqlite:///" + str(tmp_path / "x.db"))
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("UPLOADS_ROOT", str(tmp_path / "Sheets"))
    monkeypatch.setenv("store_inline_literals", "true")

    settings = Settings(_env_file=None)
    assert settings.STORE_URL.endswith("x.db")
    assert settings.PORT == 8080
    assert settings.uploads_folder_name == "Sheets"
    assert settings.STORE_INLINE_LITERALS is True


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=7000\nMAX_UPLOAD_SIZE_MB=2\n")

    settings = Settings(_env_file=env_file)
    assert settings.PORT == 7000
    assert settings.max_upload_size_bytes == 2 * 1024 * 1024


def test_url_prefix_is_normalized():
    assert Settings(_env_file=None, MARKSHEETS_URL_PREFIX="files/").MARKSHEETS_URL_PREFIX == "/files"
