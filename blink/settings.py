from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  log_level: str = "INFO"

  # Cache adapter
  warn_on_ignored_ttl: bool = Field(
    default=True,
    description="Warn once per adapter when a TTL is passed and discarded",
  )

  model_config = SettingsConfigDict(
    env_prefix="BLINK_",
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
  )


settings = Settings()
