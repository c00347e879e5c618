from datetime import datetime

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Eventry Analytics API"
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str = "changeme"
    LOG_LEVEL: str = "INFO"

    # Database
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "eventry"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: str = ""

    # Nightlife timeline window; labels wrap past midnight when END < START.
    TIMELINE_START: str = "22:00"
    TIMELINE_END: str = "05:00"
    TIMELINE_SLOT_MINUTES: int = 30

    EVENT_TOP_CITIES: int = 5
    PERIOD_TOP_CITIES: int = 10
    TOP_EVENTS_LIMIT: int = 5

    # Sentinel bounds for period=all
    ALL_PERIOD_START: datetime = datetime(2000, 1, 1, 0, 0, 0)
    ALL_PERIOD_END: datetime = datetime(2099, 12, 31, 23, 59, 59)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    def assemble_db_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

settings = Settings()
settings.DATABASE_URL = settings.assemble_db_url()
