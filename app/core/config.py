"""
Application configuration using Pydantic Settings
"""
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""
    
    # App
    APP_NAME: str = "Translation Service"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    
    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    
    # Database
    DATABASE_URL: str = Field(...)
    
    # Security
    SECRET_KEY: str = Field(...)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    LOGIN_RATE_LIMIT: str = "5/minute"
    
    # Seeding
    SEED_TOTAL: int = 100_000
    SEED_BATCH_SIZE: int = 1000
    
    PORT: int = Field(default=8000)
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
