# customer_hub/config.py

import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///db.sqlite"  # file in project root
DEFAULT_SAMPLE_CUSTOMERS_URL = "https://jsonplaceholder.typicode.com/users"


@dataclass(frozen=True)
class Settings:
    database_url: str
    sample_customers_url: str
    sample_customers_timeout: float
    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    timeout = _getenv("SAMPLE_CUSTOMERS_TIMEOUT", "10")
    try:
        sample_customers_timeout = float(timeout)
    except ValueError:
        raise ValueError(f"SAMPLE_CUSTOMERS_TIMEOUT must be a number, got {timeout!r}")

    return Settings(
        database_url=_getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        sample_customers_url=_getenv("SAMPLE_CUSTOMERS_URL", DEFAULT_SAMPLE_CUSTOMERS_URL),
        sample_customers_timeout=sample_customers_timeout,
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
    )
