"""
Supabase Configuration

Reads the Supabase project URL and anon key from the environment or a .env
file at the repo root.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class SupabaseSettings(BaseSettings):
    # Read .env by default (repo root). You can also export envs directly.
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


def load_env(path: Optional[Path] = None) -> bool:
    """Load a .env file into os.environ without overriding exported values"""
    return load_dotenv(path or PROJECT_ROOT / ".env", override=False)


@lru_cache(maxsize=1)
def get_supabase_settings() -> SupabaseSettings:
    """Get Supabase settings, raising ConfigError when required values are missing"""
    load_env()
    try:
        return SupabaseSettings()
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigError(f"Missing or invalid Supabase settings: {', '.join(missing)}") from e
