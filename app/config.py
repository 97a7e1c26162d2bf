import os
from pathlib import Path
from dotenv import load_dotenv

DOTENV_FILE = ".env"

DEFAULT_APP_BG = "linear-gradient(135deg,#eef2ff 0%, #fef3c7 100%)"


def _env_str(name: str, default: str) -> str:
    """Get an environment variable as a string. If the variable is not set or is blank, return the default."""
    raw = (os.getenv(name) or "").strip()
    return raw if raw else default


def _env_path(name: str, default: Path) -> Path:
    """Get an environment variable as a Path. If the variable is not set, return the default. If the variable is set but empty, also return the default."""
    raw = (os.getenv(name) or "").strip()
    return Path(raw) if raw else default


def _env_bool(name: str, default: bool) -> bool:
    """Get an environment variable as a boolean. Recognizes '1', 'true', 'yes', 'on' as True and '0', 'false', 'no', 'off' as False. If the variable is not set or cannot be interpreted as a boolean, return the default."""
    raw = (os.getenv(name) or "").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    """Get an environment variable as an integer. If the variable is not set or cannot be converted to an integer, return the default."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    BASE_DIR = Path(__file__).resolve().parents[1]  # project root, wherever it is

    load_dotenv(BASE_DIR / DOTENV_FILE)

    # ================ Application Settings ================
    PORT = _env_int("PORT", 8080)
    DEBUG = _env_bool("FLASK_DEBUG", False)

    # ================ Greeting Settings ================
    APP_BG = _env_str("APP_BG", DEFAULT_APP_BG)

    # ================ Logging Settings ================
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
    LOG_DIR = _env_path("LOG_DIR", BASE_DIR / "logs")
    LOG_FILE = _env_str("LOG_FILE", "app.log")
    LOG_TO_FILE = _env_bool("LOG_TO_FILE", True)
    LOG_MAX_BYTES = _env_int("LOG_MAX_BYTES", 10 * 1024 * 1024)
    LOG_BACKUP_COUNT = _env_int("LOG_BACKUP_COUNT", 5)

    WERKZEUG_LOG_LEVEL = "INFO"


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class TestConfig(Config):
    TESTING = True
    DEBUG = True
    LOG_LEVEL = "DEBUG"
    LOG_TO_FILE = False


class ProductionConfig(Config):
    DEBUG = False
    LOG_LEVEL = "INFO"

    WERKZEUG_LOG_LEVEL = "WARNING"  # Reduce noisy request logs
