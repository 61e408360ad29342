import os
from functools import lru_cache

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), '.env')
load_dotenv(dotenv_path=env_path)

class Settings(BaseSettings):
    SERVICE_NAME: str = "databricks-relay"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    DATABRICKS_URL: str = ""
    DATABRICKS_TOKEN: str = ""
    DATABRICKS_TIMEOUT_SECONDS: float = 600.0

    class Config:
        case_sensitive = True

    @property
    def is_configured(self) -> bool:
        return bool(self.DATABRICKS_URL and self.DATABRICKS_TOKEN)

@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    return Settings()
