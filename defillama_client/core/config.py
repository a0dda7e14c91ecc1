from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.llama.fi"
DEFAULT_TIMEOUT_MS = 15_000
DEFAULT_RETRIES = 2


class ClientConfig(BaseModel):
    """Immutable options for a DefiLlamaClient.

    base_url loses its trailing slash so paths can be appended verbatim.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = Field(DEFAULT_TIMEOUT_MS, gt=0)
    retries: int = Field(DEFAULT_RETRIES, ge=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if v.endswith("/"):
            return v[:-1]
        return v


class Settings(BaseSettings):
    """Client settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., DEBUG, DEFILLAMA_BASE_URL,
    DEFILLAMA_TIMEOUT_MS, DEFILLAMA_RETRIES).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False

    # DefiLlama API
    defillama_base_url: str = DEFAULT_BASE_URL
    defillama_timeout_ms: int = DEFAULT_TIMEOUT_MS
    defillama_retries: int = DEFAULT_RETRIES

    def client_config(self) -> ClientConfig:
        """Build the immutable client config; raises ValidationError on bad values."""
        return ClientConfig(
            base_url=self.defillama_base_url,
            timeout_ms=self.defillama_timeout_ms,
            retries=self.defillama_retries,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
