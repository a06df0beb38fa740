from dotenv import load_dotenv
from pydantic import BaseModel
from typing import List
import os

# Load .env automatically
load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseModel):
    environment: str = os.getenv("ENVIRONMENT", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    cors_origins: List[str] = _split_origins(
        os.getenv(
            "CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000",
        )
    )
    seed_mock_data: bool = os.getenv("SEED_MOCK_DATA", "true").strip().lower() == "true"


# Global settings instance
settings = Settings()
