from mtg_inventory.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url.startswith("postgresql+asyncpg://")
        assert settings.default_page_size == 50
        assert settings.max_page_size == 500
        assert settings.debug is False

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///inventory.db")
        settings = Settings(_env_file=None)
        assert settings.default_page_size == 25
        assert settings.database_url == "sqlite+aiosqlite:///inventory.db"

    def test_only_used_fields_declared(self) -> None:
        assert set(Settings.model_fields) == {
            "debug",
            "database_url",
            "default_page_size",
            "max_page_size",
        }
