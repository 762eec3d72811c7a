"""
Configuration - bank gateway and service settings
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Configuration
    PROJECT_NAME: str = "Bank Transfer Inquiry API"
    API_V1_STR: str = "/api/v1"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Bank Gateway Configuration
    BANK_GATEWAY_URL: str = "http://localhost:8080"
    BANK_GATEWAY_TRANSFER_PATH: str = "/bank/v1/transfers/inquiry"
    BANK_GATEWAY_TIMEOUT_SECONDS: float = 30.0
    BANK_GATEWAY_API_KEY: Optional[str] = None


settings = Settings()
