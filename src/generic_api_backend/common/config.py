'''
Holds all the configurations
'''
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Manages application configuration using environment variables.
    """
    model_config = SettingsConfigDict(
        env_file=".env", # automatically loads the .env
        env_nested_delimiter="__", # CONNECTION_STRINGS__Postgres=...
        extra="ignore",
    )

    # Application Metadata
    APP_NAME: str = "Generic API Backend"
    APP_VERSION: str = "0.1.0"

    # Database selection
    DATABASE_PROVIDER: Optional[str] = None
    CONNECTION_STRINGS: dict[str, str] = {}

# Create a single, importable instance of the settings
settings = Settings()
