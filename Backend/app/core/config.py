from pydantic_settings import BaseSettings
from typing import List, Literal


class Settings(BaseSettings):
    """
    Application configuration settings.
    Loads from environment variables or .env file.
    """

    # Application
    APP_NAME: str = "CodeDIY API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True

    # Database
    DATABASE_URL: str = "mongodb://localhost:27017/codediy"
    DATABASE_NAME: str = "codediy"

    # Adapters
    # Options: mock, mongo / mock, youtube
    # - mock: In-process fake (development, tests)
    # - mongo: MongoDB via Motor + Beanie
    # - youtube: YouTube Data API v3
    STORE_ADAPTER_TYPE: Literal["mock", "mongo"] = "mongo"
    VIDEO_INDEX_ADAPTER_TYPE: Literal["mock", "youtube"] = "youtube"

    # YouTube Data API
    YOUTUBE_API_KEY: str = ""
    YOUTUBE_API_BASE_URL: str = "https://www.googleapis.com/youtube/v3"
    YOUTUBE_RELEVANCE_LANGUAGE: str = "en"

    # Search
    VIDEO_SEARCH_MAX_RESULTS: int = 15
    VIDEO_SEARCH_TIMEOUT: float = 10.0  # seconds

    # CORS (comma separated)
    CORS_ORIGINS: str = "http://localhost:8081,http://localhost:19006,http://127.0.0.1:8081"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
