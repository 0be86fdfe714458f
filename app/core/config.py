from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    PROJECT_NAME: str = "API granja avicola"
    DATABASE_URL: str = "sqlite:///./poultry.db"

    # Logs
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True
    LOG_JSON: bool = False
    LOG_LEVEL: str = "INFO"


settings = Settings()
