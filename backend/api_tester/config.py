from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RELAY_URL = "http://localhost:5001"
DEFAULT_HISTORY_LIMIT = 10


class Settings(BaseSettings):
    model_config = SettingsConfigDict(populate_by_name=True)

    relay_enabled: bool = Field(default=True, alias="API_TESTER_RELAY_ENABLED")
    relay_url: str = Field(default=DEFAULT_RELAY_URL, alias="API_TESTER_RELAY_URL")
    history_limit: int = Field(
        default=DEFAULT_HISTORY_LIMIT, ge=1, alias="API_TESTER_HISTORY_LIMIT"
    )
    request_timeout: float = Field(default=30.0, alias="API_TESTER_REQUEST_TIMEOUT")
    follow_redirects: bool = Field(default=True, alias="API_TESTER_FOLLOW_REDIRECTS")
    cors_origins: List[str] = Field(
        default=["http://localhost:5173", "http://127.0.0.1:5173"],
        alias="API_TESTER_CORS_ORIGINS",
    )
    log_level: str = Field(default="INFO", alias="API_TESTER_LOG_LEVEL")

    @property
    def relay(self) -> Optional[str]:
        """Relay base URL, or None when local targets are dispatched directly."""
        return self.relay_url if self.relay_enabled else None


@lru_cache
def get_settings() -> Settings:
    return Settings()
