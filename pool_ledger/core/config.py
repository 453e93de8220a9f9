from decimal import Decimal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    CURRENCY_TOLERANCE: Decimal = Decimal("0.01")
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "POOL_LEDGER_"

settings = Settings()
