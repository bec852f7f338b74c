"""Environment-driven application settings."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str) -> bool:
    return os.getenv(name, "0") == "1"


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_format: str = "json"
    # PostgreSQL
    use_local_db: bool = False
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "profiles"
    postgres_user: str = "profiles"
    postgres_password: str = "profiles_dev_password"
    # Supabase
    supabase_disabled: bool = False
    supabase_url: str | None = None
    supabase_key: str | None = None

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            env=os.getenv("ENV", "development"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "json"),
            use_local_db=_flag("USE_LOCAL_DB"),
            postgres_host=os.getenv("POSTGRES_HOST", "localhost"),
            postgres_port=int(os.getenv("POSTGRES_PORT", "5432")),
            postgres_db=os.getenv("POSTGRES_DB", "profiles"),
            postgres_user=os.getenv("POSTGRES_USER", "profiles"),
            postgres_password=os.getenv("POSTGRES_PASSWORD", "profiles_dev_password"),
            supabase_disabled=_flag("SUPABASE_DISABLED"),
            supabase_url=os.getenv("SUPABASE_URL"),
            supabase_key=os.getenv("SUPABASE_ANON_KEY"),
        )
