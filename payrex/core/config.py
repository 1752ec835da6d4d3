from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAYREX_", env_file=".env", extra="ignore")

    api_key: Optional[str] = None
    api_base_url: str = "https://api.payrexhq.com"
    timeout: float = 30.0
    test_mode: bool = False

    log_level: str = "INFO"

settings = Settings()
