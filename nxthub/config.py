from typing import Literal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Environment
    APP_NAME: str = "NxtHub Campaign Desk"
    DEV_MODE: bool = True  # Set to False in production
    LOG_LEVEL: str = "INFO"
    
    # Storage
    DATABASE_URL: str = "sqlite+aiosqlite:///./nxthub.db"
    STORAGE_BACKEND: Literal["sql", "memory"] = "sql"
    STORAGE_KEY_PREFIX: str = "nxthub"
    SQL_ECHO: bool = False
    
    # Login
    LOGIN_DELAY_SECONDS: float = 0.8  # Simulated network delay on login
    
    # API Settings
    API_PREFIX: str = "/api"
    
    class Config:
        env_file = ".env"

settings = Settings()
