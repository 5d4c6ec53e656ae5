# bgg_wrapped/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BGG_PROXY_URL: str = "https://bgg-wrapped-backend.vercel.app/api/bgg-proxy"
    EXPORT_RETRY_DELAY_SECONDS: float = Field(3.0, ge=0)
    EXPORT_MAX_RETRIES: int = Field(4, ge=0)
    HTTP_TIMEOUT_SECONDS: float = 30.0
    HTTP2: bool = True
    USER_AGENT: str = "BoardGameWrapped/1.0 (+https://boardgamegeek.com)"
    LOG_LEVEL: str = "INFO"

settings = Settings()
