from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Server-side secret, never sent to the client
    GOOGLE_MAPS_API_KEY: str = ""
    PLACES_API_URL: str = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"

    # None means the outbound call waits as long as the provider does
    PLACES_TIMEOUT_SECONDS: Optional[float] = None

    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Comma separated list, "*" allows any origin
    CORS_ORIGINS: str = "*"

    LOGGER: int = 20
    # Empty string logs to the console only
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
