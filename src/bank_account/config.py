from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    # Minor currency units the balance may go below zero
    overdraft_limit: int = Field(default=50, ge=0)


settings = Settings()
