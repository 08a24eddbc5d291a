from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGEKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    EXCEED_COUNT: bool = False
    EXCEED_TOTAL_PAGES: bool = False

    DEFAULT_LIMIT: int = 20
    MAX_LIMIT: int = 100


settings = Settings()
