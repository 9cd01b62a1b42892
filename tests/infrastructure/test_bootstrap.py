"""Tests for settings resolution and the composition root."""

from pathlib import Path

from structlog.testing import capture_logs

from orderhub.infrastructure.bootstrap import build_context
from orderhub.infrastructure.config import Settings
from orderhub.infrastructure.persistence.json_user_repository import JsonUserRepository
from orderhub.infrastructure.persistence.sql_user_repository import SqlUserRepository


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ORDERHUB_STORAGE_BACKEND", raising=False)
        monkeypatch.delenv("ORDERHUB_DATA_DIR", raising=False)
        settings = Settings(_env_file=None)
        assert settings.storage_backend == "json"
        assert settings.data_dir == Path("data")

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ORDERHUB_STORAGE_BACKEND", "sql")
        monkeypatch.setenv("ORDERHUB_PORT", "9001")
        settings = Settings(_env_file=None)
        assert settings.storage_backend == "sql"
        assert settings.port == 9001

    def test_sqlite_url_derived_from_data_dir(self, tmp_path):
        settings = Settings(_env_file=None, data_dir=tmp_path, database_url="")
        assert settings.effective_database_url == f"sqlite:///{tmp_path / 'orderhub.db'}"

    def test_explicit_database_url_wins(self):
        settings = Settings(_env_file=None, database_url="mysql+pymysql://u:p@db/orders")
        assert settings.effective_database_url == "mysql+pymysql://u:p@db/orders"


class TestBuildContext:

    def test_json_backend(self, tmp_path):
        context = build_context(Settings(_env_file=None, storage_backend="json", data_dir=tmp_path))
        assert isinstance(context.user_repo, JsonUserRepository)
        assert (tmp_path / "orders.json").exists()

    def test_sql_backend_wires_handlers(self, tmp_path):
        with capture_logs() as logs:
            context = build_context(
                Settings(_env_file=None, storage_backend="sql", data_dir=tmp_path, database_url="")
            )
        assert {"event": "database.ready", "dialect": "sqlite", "log_level": "info"} in logs
        assert isinstance(context.user_repo, SqlUserRepository)

        user = context.create_user.handle(email="a@example.com", name="Ann")
        assert context.show_user.handle(user.id).name == "Ann"
