"""Configuration settings for the DVR Stremio addon."""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Service settings
    host: str = "0.0.0.0"
    port: int = 7001
    debug: bool = False

    # EasyProxy settings
    easyproxy_url: str = "http://localhost:8080"
    easyproxy_password: str = ""
    request_timeout: float = 10.0  # seconds

    @field_validator("easyproxy_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    class Config:
        env_file = ".env"
        frozen = True


settings = Settings()
