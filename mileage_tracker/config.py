# mileage_tracker/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./mileage_tracker.db"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 8080
    CORS_ORIGINS: list[str] = ["*"]

    # ── Shifts ────────────────────────────────────────────────────────────
    FIRST_SHIFT_START_HOUR: int = 5      # 05:00 local
    SECOND_SHIFT_START_HOUR: int = 17    # 17:00 local
    COVERAGE_WINDOW_DAYS: int = 7

    # ── Business rules ────────────────────────────────────────────────────
    STRICT_ROSTER_REFERENCES: bool = False    # Reject unknown vehicle/supervisor on shift start
    ALLOW_ACTIVE_ENTRY_DELETION: bool = True

    # ── Notifications ─────────────────────────────────────────────────────
    NOTIFY_WEBHOOK_URL: Optional[str] = None  # Leave empty to only log notifications
    NOTIFY_TIMEOUT_SECONDS: float = 5.0
    VAPID_PUBLIC_KEY: Optional[str] = None
    VAPID_PRIVATE_KEY: Optional[str] = None

    @property
    def VAPID_CONFIGURED(self) -> bool:
        return bool(self.VAPID_PUBLIC_KEY and self.VAPID_PRIVATE_KEY)

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None         # Defaults to <project>/logs
    LOG_TO_FILE: bool = True
    LOG_MAX_BYTES: int = 5 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 10

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
