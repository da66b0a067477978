from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Simple Financial Data API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Price source: "mock" serves the static table, "live" proxies to CoinGecko
    PRICE_SOURCE: Literal["mock", "live"] = "live"

    # CoinGecko
    COINGECKO_BASE_URL: str = "https://api.coingecko.com/api/v3"
    COINGECKO_TIMEOUT: float = 5.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
