"""Environment-driven settings, read once and consumed by config/settings.py."""

from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = BASE_DIR / ".env"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICKETING_",
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra="ignore",
    )

    DEBUG: bool = False
    SECRET_KEY: SecretStr = SecretStr("dev_secret_key_change_in_production")
    ALLOWED_HOSTS: str = "localhost,127.0.0.1"  # comma separated

    # SQLite file backing the events and ticket_sales tables
    DATABASE_PATH: Path = BASE_DIR / "events_database.db"

    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]


app_settings = AppSettings()
