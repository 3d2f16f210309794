from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Logging
    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"
    LOG_FILE: str = "app.log"
    LOG_TO_FILE: bool = True

    # Overpass mirrors, tried in this exact order (JSON list when set via env)
    OVERPASS_ENDPOINTS: List[str] = [
        "https://overpass-api.de/api/interpreter",
        "https://overpass.kumi.systems/api/interpreter",
        "https://maps.mail.ru/osm/tools/overpass/api/interpreter",
    ]
    OVERPASS_TIMEOUT_SECONDS: float = 10.0  # per mirror attempt
    OVERPASS_TOTAL_TIMEOUT_SECONDS: Optional[float] = None  # whole failover run, None = unbounded
    OVERPASS_QUERY_TIMEOUT_SECONDS: int = 25  # [timeout:] inside the QL query
    OVERPASS_USER_AGENT: str = "buildex-nearby/1.0"

    # Nearby places
    PLACES_CACHE_TTL_SECONDS: float = 300.0
    PLACES_MAX_RESULTS: int = 20
    PLACES_DEFAULT_RADIUS_METERS: int = 3000
    PLACES_COORDINATE_PRECISION: int = 4  # ~11 m

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
