# customer_hub/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from customer_hub.config import load_settings


@lru_cache(maxsize=None)
def engine_for(database_url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(database_url, future=True)


def get_engine() -> Engine:
    """
    FastAPI dependency: the engine for the configured DATABASE_URL.

    Route handlers receive it through Depends(get_engine) so tests can swap
    in their own engine with app.dependency_overrides.
    """
    return engine_for(load_settings().database_url)
