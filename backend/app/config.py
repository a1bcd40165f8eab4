"""Application configuration."""

import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()

LOCAL_DEV_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


class Settings(BaseSettings):
    """Settings for the projection API."""

    app_name: str = "Slatecast Projection API"
    version: str = "0.1.0"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Browser client allowed through CORS
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:5173")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins: the frontend, plus local dev servers in debug mode."""
        origins = [self.frontend_url]
        if self.debug:
            origins.extend(o for o in LOCAL_DEV_ORIGINS if o not in origins)
        return [origin for origin in origins if origin]


settings = Settings()
