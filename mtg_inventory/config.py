from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    debug: bool = False

    database_url: str = "postgresql+asyncpg://localhost:5432/mtg_inventory"

    # Listing requests without an explicit page size get this many rows
    default_page_size: int = 50

    # Larger page sizes are clamped to this value
    max_page_size: int = 500


settings = Settings()
