# employee_manager/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Storage settings
    DATA_FILE: str = "employees.json"
    SEED_SAMPLE_DATA: bool = False

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = "/api"

    # MCP settings
    MCP_SERVER_NAME: str = "employee-mcp"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
