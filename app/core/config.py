from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    PROJECT_NAME: str = "Exam PDF OCR Importer"
    PROJECT_VERSION: str = "1.0.0"

    # Mathpix Configuration
    MATHPIX_APP_ID: Optional[str] = None
    MATHPIX_APP_KEY: Optional[str] = None
    MATHPIX_BASE_URL: str = "https://api.mathpix.com/v3"
    MATHPIX_POLL_INTERVAL: float = 2.0  # seconds between status polls
    MATHPIX_MAX_POLL_ATTEMPTS: int = 150
    MATHPIX_REQUEST_TIMEOUT: float = 60.0

    # AI Config
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # Server
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]
    TEST_PAYLOAD_PATH: Optional[str] = None  # JSON file used by GET /test
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
