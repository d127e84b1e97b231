from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "OMAV Construction"
    CURRENCY: str = "INR"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Storage — "memory" keeps everything in-process, "sql" uses DATABASE_URL
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./omav.db"

    # Admin sessions
    SESSION_SECRET: str = "omav-construction-secret-key"
    SESSION_COOKIE_NAME: str = "omav.sid"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60
    SESSION_COOKIE_SECURE: bool = False

    # Seeded on first startup when no such user exists
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"

    class Config:
        env_file = ".env"


settings = Settings()
