import os
from pathlib import Path
from typing import Optional

from decouple import Config, RepositoryEnv
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = next(p for p in Path(__file__).resolve().parents if (p / "main.py").exists())
BASE_DIR = PROJECT_ROOT

# Determine which env file to load
env_file = os.getenv("ENV_FILE", ".env")
env_path = PROJECT_ROOT / env_file

# Only use RepositoryEnv if the env file exists
if env_path.exists():
    config = Config(RepositoryEnv(env_path))
else:
    # fallback: read directly from os.environ using decouple's AutoConfig
    from decouple import AutoConfig

    config = AutoConfig(search_path=None)

# Values shipped in .env.example; treated the same as a missing value.
SUPABASE_URL_PLACEHOLDER = "https://your-project.supabase.co"
SUPABASE_KEY_PLACEHOLDER = "your-anon-key-here"


def is_supabase_configured(url: Optional[str], api_key: Optional[str]) -> bool:
    """Whether both Supabase credentials are present and not the example values.

    Examples:
        >>> is_supabase_configured("https://abc.supabase.co", "your-anon-key-here")
        False
    """

    url = (url or "").strip()
    api_key = (api_key or "").strip()
    return bool(
        url
        and api_key
        and url != SUPABASE_URL_PLACEHOLDER
        and api_key != SUPABASE_KEY_PLACEHOLDER
    )


class Settings(BaseSettings):
    # App general
    DEBUG: bool = config("DEBUG", default=False, cast=bool)
    APP_NAME: str = config("APP_NAME", default="SPILL")
    APP_VERSION: str = config("APP_VERSION", default="1.0.0")
    ENVIRONMENT: str = config("ENVIRONMENT", default="dev")
    APP_PORT: int = config("APP_PORT", default=8000, cast=int)
    APP_URL: str = config("APP_URL", default="https://spill.app")
    DEV_URL: str = config("DEV_URL", default="http://localhost:3000")
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

    # Supabase (hosted signup table)
    SUPABASE_URL: str = config("SUPABASE_URL", default="")
    SUPABASE_ANON_KEY: str = config("SUPABASE_ANON_KEY", default="")
    SUPABASE_SIGNUP_TABLE: str = config("SUPABASE_SIGNUP_TABLE", default="email_signups")
    SUPABASE_TIMEOUT_SECONDS: float = config("SUPABASE_TIMEOUT_SECONDS", default=10.0, cast=float)

    # Which store records signups: "supabase" or "database"
    SIGNUP_BACKEND: str = config("SIGNUP_BACKEND", default="supabase")

    # Database
    DB_TYPE: str = config("DB_TYPE", default="sqlite")
    DB_HOST: str = config("DB_HOST", default="localhost")
    DB_PORT: int = config("DB_PORT", default=5432, cast=int)
    DB_USER: str = config("DB_USER", default="user")
    DB_PASS: str = config("DB_PASS", default="password")
    DB_NAME: str = config("DB_NAME", default="spill")
    DB_ECHO: bool = config("DB_ECHO", default=False, cast=bool)

    # Desktop download
    DOWNLOAD_ASSET_PATH: str = config(
        "DOWNLOAD_ASSET_PATH", default="app/static/downloads/Spill 1.0.dmg"
    )
    DOWNLOAD_FILENAME: str = config("DOWNLOAD_FILENAME", default="Spill 1.0.dmg")
    DOWNLOAD_FALLBACK_URL: str = config("DOWNLOAD_FALLBACK_URL", default="")

    # Landing page links
    SOURCE_CODE_URL: str = config("SOURCE_CODE_URL", default="https://github.com/faraaz-baig/spill")
    GROUP_CHAT_URL: str = config("GROUP_CHAT_URL", default="#")

    @property
    def SUPABASE_CONFIGURED(self) -> bool:
        return is_supabase_configured(self.SUPABASE_URL, self.SUPABASE_ANON_KEY)

    @property
    def DOWNLOAD_ASSET_FILE(self) -> Path:
        path = Path(self.DOWNLOAD_ASSET_PATH)
        return path if path.is_absolute() else PROJECT_ROOT / path

    model_config = SettingsConfigDict(extra="allow")


settings = Settings()
