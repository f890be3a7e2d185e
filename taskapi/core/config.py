"""Application configuration"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Project
    PROJECT_NAME: str = "Task API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = ""

    # Database
    DATABASE_URL: str = "sqlite:///./tasks.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    # Logging
    LOG_LEVEL: str = "INFO"

    # Tasks
    # Fields a PATCH request is allowed to overwrite
    PATCHABLE_FIELDS: List[str] = ["name"]
    # Return 404 instead of an empty success on GET/DELETE misses
    STRICT_NOT_FOUND: bool = False

    class Config:
        """Pydantic config"""

        env_file = ".env"
        case_sensitive = True


settings = Settings()  # type: ignore
