# taskboard/config/settings.py
# Environment driven settings for the API, the seed script and the server runner

import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./taskboard.db"
DEFAULT_SECRET_KEY = "change-me"


class Settings:
    """Application settings.

    Every value falls back to an environment variable, so the same object
    serves the API, ``seed_admin.py`` and ``start_server.py``. Tests pass
    explicit keyword values instead.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        db_sslmode: Optional[str] = None,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        access_token_expire_minutes: Optional[int] = None,
        cors_origins: Optional[List[str]] = None,
        log_level: Optional[str] = None,
    ):
        if database_url is None:
            database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
        self.database_url = database_url
        self.db_sslmode = db_sslmode if db_sslmode is not None else os.getenv("DB_SSLMODE")
        self.secret_key = secret_key if secret_key is not None else os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
        self.algorithm = algorithm if algorithm is not None else os.getenv("ALGORITHM", "HS256")
        if access_token_expire_minutes is None:
            access_token_expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))
        self.access_token_expire_minutes = access_token_expire_minutes
        if cors_origins is None:
            raw = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
            cors_origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        self.cors_origins = cors_origins
        if log_level is None:
            log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_level = log_level.upper()

    @property
    def uses_default_secret(self) -> bool:
        return self.secret_key == DEFAULT_SECRET_KEY


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the root logger"""
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
