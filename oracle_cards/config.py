from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application configuration"""

    # App Settings
    app_name: str = "Oracle Cards"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Supabase Settings
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    cards_table: str = "cards"

    # Navigation targets (sibling screens)
    home_path: str = "/home"
    add_card_path: str = "/add-card"

    # Server Settings
    secret_key: str = "dev-secret-key-change-in-production"
    host: str = "0.0.0.0"
    port: int = 5000
    max_screens: int = 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
