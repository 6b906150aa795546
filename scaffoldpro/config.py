from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./scaffoldpro.db"
    COMPANY_NAME: str = "ScaffoldPro"
    COMPANY_EMAIL: str = "info@scaffoldpro.app"
    COMPANY_WEBSITE: str = "scaffoldpro.app"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Calculation conventions, see calculators/mason_frame.py
    DEFAULT_SYSTEM: str = "mason-frame"
    FRAMES_PER_LEVEL: bool = True
    GUARDRAILS_TOP_LEVEL_ONLY: bool = False
    UNIFORM_HEIGHT: bool = True

    # Admin listing of the waitlist is open when empty
    ADMIN_API_KEY: str = ""

    class Config:
        env_file = ".env"


settings = Settings()
