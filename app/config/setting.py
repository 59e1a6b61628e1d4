from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    app_name: str = "Monobank Transactions"
    environment: str = "development"
    allowed_origins: str = "*"

    @property
    def parsed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    # Monobank settings
    monobank_api_token: Optional[str] = None
    monobank_account: str = "0"  # "0" is Monobank's alias for the default account
    monobank_api_url: str = "https://api.monobank.ua/personal/statement"
    monobank_timeout_seconds: Optional[float] = None

    # Gate settings
    cooldown_seconds: int = 60
    lookback_days: int = 30

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

settings = Settings()
