## Application settings configuration
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    # AI gateway settings (OpenAI-compatible chat completions)
    LOVABLE_API_KEY: str | None = None
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_MODEL: str = "google/gemini-2.5-flash"
    REQUEST_TIMEOUT_SECONDS: float = Field(default=120, gt=0)

    # Reject replies that parse as JSON but are not roadmap-shaped
    ROADMAP_STRICT_SCHEMA: bool = False

    # CORS
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_HEADERS: str = "authorization, x-client-info, apikey, content-type"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    def cors_headers(self) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Headers": self.CORS_ALLOW_HEADERS,
        }
