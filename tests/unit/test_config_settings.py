"""Unit tests for application settings configuration."""

from pathlib import Path

from brick_catalog.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///catalog.db")
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "2")
    monkeypatch.setenv("LOG_LEVEL_IMPORT", "DEBUG")

    settings = Settings()

    assert settings.database_url == "sqlite:///catalog.db"
    assert settings.max_upload_size_mb == 2
    assert settings.log_level_import == "DEBUG"
