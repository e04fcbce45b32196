"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite:///./netitem.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 확장 아이템 코덱 ("base64")
    EXTENSION_CODEC: str = "base64"

    # True면 슬롯 하나라도 깨졌을 때 인벤토리 복원 전체를 실패시킨다
    STRICT_RESTORE: bool = False


settings = Settings()
