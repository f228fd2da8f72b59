from typing import List
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Try to load .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(str(env_path))

class Settings(BaseSettings):
    PROJECT_NAME: str = "Songs API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Songs resource
    SONGS_PREFIX: str = "/songs"
    SONGS_STORE_ENABLED: bool = True  # False serves the all-stub route table
    SONGS_ACCEPT_BODY: bool = False   # POST /songs ignores its body unless enabled
    STRICT_VALIDATION: bool = False   # Reject songs without title/artist

    # CORS Settings
    _CORS_ORIGINS: str = "*"  # Allow all origins in development
    ALLOWED_ORIGINS: str | None = None  # Alternative env var name
    _CORS_METHODS: str = "GET,POST,PUT,DELETE,OPTIONS"
    _CORS_HEADERS: str = "Content-Type,Authorization"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        # First check ALLOWED_ORIGINS, then fall back to _CORS_ORIGINS
        origins = self.ALLOWED_ORIGINS if self.ALLOWED_ORIGINS is not None else self._CORS_ORIGINS
        return parse_comma_separated_list(origins)

    @property
    def CORS_METHODS(self) -> List[str]:
        return parse_comma_separated_list(self._CORS_METHODS)

    @property
    def CORS_HEADERS(self) -> List[str]:
        return parse_comma_separated_list(self._CORS_HEADERS)

    class Config:
        env_file = ".env"
        case_sensitive = True

def parse_comma_separated_list(value: str | List[str] | None) -> List[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if value == "*":
        return ["*"]
    return [item.strip() for item in value.split(",") if item.strip()]

# Create global settings object
settings = Settings()
