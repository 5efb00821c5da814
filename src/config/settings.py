"""Application settings via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # ── Record store ──
    RECORDS_PATH: str = "db.json"
    RECORDS_COLLECTION: str = "records"

    # ── Logging ──
    LOG_LEVEL: str = "INFO"

    # ── Langfuse ──
    LANGFUSE_PUBLIC_KEY: str = ""
    LANGFUSE_SECRET_KEY: str = ""
    LANGFUSE_HOST: str = "http://localhost:3000"

    @property
    def tracing_enabled(self) -> bool:
        return bool(self.LANGFUSE_PUBLIC_KEY and self.LANGFUSE_SECRET_KEY)

    # ── API ──
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000


settings = Settings()
