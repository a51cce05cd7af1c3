"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # App
    app_name: str = "GoLoyal"
    log_level: str = "INFO"
    environment: str = "production"  # development | production

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


settings = Settings()
