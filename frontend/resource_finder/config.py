from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Places proxy
    BACKEND_URL: str = "http://localhost:3001"

    # Used until (or instead of) the browser reports a position
    DEFAULT_LAT: float = 37.7749
    DEFAULT_LNG: float = -122.4194
    DEFAULT_ZOOM: int = 11

    # Tile template may contain "{api_key}" for providers that need a publishable key
    MAP_TILES_URL: str = "OpenStreetMap"
    MAP_TILES_ATTRIBUTION: str = ""
    MAP_TILES_API_KEY: str = ""

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def tiles(self) -> str:
        return self.MAP_TILES_URL.replace("{api_key}", self.MAP_TILES_API_KEY)

settings = Settings()
