from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # API Settings
    app_name: str = "Hearthstone Card Catalog"
    app_version: str = "1.0.0"
    debug: bool = False

    # Catalog Settings
    catalog_url: str = "https://api.hearthstonejson.com/v1/latest/enUS/cards.collectible.json"
    refresh_interval_seconds: float = 24 * 60 * 60
    fetch_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "INFO"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 3000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


settings = Settings()
