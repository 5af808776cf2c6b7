from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # Perplexity API config
    PERPLEXITY_API_KEY: str = Field(..., min_length=1)
    PERPLEXITY_BASE_URL: str = "https://api.perplexity.ai"
    PERPLEXITY_TIMEOUT_MS: int = Field(default=300000, gt=0)

    # App server config
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, ge=0, le=65535)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def timeout_seconds(self) -> float:
        return self.PERPLEXITY_TIMEOUT_MS / 1000

@lru_cache()
def get_settings() -> Settings:
    return Settings()
