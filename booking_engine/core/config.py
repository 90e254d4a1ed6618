from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    VAT_RATE: float = 0.19
    RATE_PER_KM: float = 0.5
    BOX_PRICE: float = 2.5
    DEFAULT_DURATION_MINUTES: int = 120
    MAX_BOOKING_DAYS: int = 7

    BOOKING_API_BASE_URL: str | None = None
    BOOKING_API_TOKEN: str | None = None
    BOOKING_API_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
