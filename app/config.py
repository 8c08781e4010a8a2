"""
Application configuration
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""
    
    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080
    API_TITLE: str = "Class Collector API"
    API_VERSION: str = "0.1.0"
    
    # Collector
    COLLECTOR_OUTPUT_ROOT: str = "/files/collected"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
