# server/config.py

import os
from dataclasses import dataclass
from functools import lru_cache
from dotenv import load_dotenv
from core.reload import DEFAULT_RELOAD_COMMAND


load_dotenv()


@dataclass(frozen=True)
class Settings:
    hosts_file: str = "./hosts"
    users_file: str = "users.json"
    secret_key: str = "secret"
    access_token_expire_minutes: int = 60
    reload_command: str = DEFAULT_RELOAD_COMMAND
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000


def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        hosts_file=os.getenv("HOSTS_FILE", defaults.hosts_file),
        users_file=os.getenv("USERS_FILE", defaults.users_file),
        secret_key=os.getenv("JWT_SECRET_KEY", defaults.secret_key),
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", defaults.access_token_expire_minutes)),
        reload_command=os.getenv("RELOAD_COMMAND", defaults.reload_command),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
        api_host=os.getenv("API_HOST", defaults.api_host),
        api_port=int(os.getenv("API_PORT", defaults.api_port)),
    )


@lru_cache
def get_settings() -> Settings:
    """
    Process-wide settings, read once. The JWT signing key lives here for
    the lifetime of the process.
    """
    return load_settings()
