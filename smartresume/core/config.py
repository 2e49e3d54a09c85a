from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./smartresume.db"

    # AI providers. Only the key of the selected provider is needed.
    AI_PROVIDER: Literal["gemini", "openai"] = "gemini"
    GOOGLE_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"
    AI_TIMEOUT_SECONDS: float = 60.0
    # "raise" surfaces provider failures; "fallback" degrades to unmodified data
    AI_FAILURE_MODE: Literal["raise", "fallback"] = "raise"

    # "weasyprint" renders in-process; "playwright" drives headless Chromium
    PDF_ENGINE: Literal["weasyprint", "playwright"] = "weasyprint"
    PDF_TIMEOUT_SECONDS: float = 30.0

    # Headers forwarded by the upstream identity middleware
    AUTH_USER_HEADER: str = "X-User-Id"
    AUTH_EMAIL_HEADER: str = "X-User-Email"
    AUTH_FIRST_NAME_HEADER: str = "X-User-First-Name"
    AUTH_LAST_NAME_HEADER: str = "X-User-Last-Name"
    AUTH_PROFILE_IMAGE_HEADER: str = "X-User-Profile-Image"

    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
