from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "production"
    SERVICE_NAME: str = "route-navigator"
    LOG_LEVEL: str = "INFO"

    NAVER_APP_NAME: str = "route-navigator"
    TMAP_MODE: Literal["tmap", "tmap-extended"] = "tmap"

    MAX_PLANNING_SESSIONS: int = 1000
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
