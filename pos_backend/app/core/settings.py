import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.app_name = "POS"
        self.api_version = "1.0.0"
        self.environment = os.getenv("POS_ENV", "development")
        self.database_url = os.getenv("POS_DATABASE_URL", "sqlite:///./pos.db")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins = [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
        self.max_ledger_sessions = int(os.getenv("POS_MAX_LEDGER_SESSIONS", "1000"))
        self.seed_catalog = _env_flag("POS_SEED_CATALOG", True)


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings():
    """Drop the cached Settings so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None
