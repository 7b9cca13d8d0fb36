from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # fallback credentials, only used while no team is stored
    chatgpt_token: str = ""
    chatgpt_account_id: str = ""

    database_url: str = "sqlite:///./teams.db"

    invite_api_base_url: str = "https://chat.openai.com"
    invite_timeout_s: float = 30.0

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
