from app.core.config import Settings, _env_list, _env_bool


class TestSettings:
    """Тесты настроек"""

    def test_env_list_strips_items(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.local, http://b.local,")

        assert _env_list("CORS_ORIGINS") == ["http://a.local", "http://b.local"]

    def test_env_list_default(self, monkeypatch):
        monkeypatch.delenv("TRUSTED_HOSTS", raising=False)

        assert _env_list("TRUSTED_HOSTS") == ["*"]

    def test_env_bool(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "TRUE")

        assert _env_bool("DEBUG", "False") is True

    def test_server_config(self):
        settings = Settings()

        config = settings.get_server_config()

        assert config["host"] == settings.HOST
        assert config["port"] == settings.PORT
        assert config["log_level"] == settings.LOG_LEVEL.lower()

    def test_test_database_is_used(self):
        assert Settings.DATABASE_URL == "sqlite:///./test.db"
