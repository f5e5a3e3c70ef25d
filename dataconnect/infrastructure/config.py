"""Runtime settings, read from the environment or a .env file."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./dataconnect.db"
    database_echo: bool = False
    data_dir: Path = Path("./data")  # JsonFileConnector default root


settings = Settings()
