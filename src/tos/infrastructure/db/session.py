from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tos.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _build_engine(database_url: str, pool_size: int, connect_timeout: int) -> Engine:
    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=pool_size,
        connect_args={"connect_timeout": connect_timeout},
    )


def get_engine(settings: Settings | None = None) -> Engine:
    settings = settings or get_settings()
    return _build_engine(
        settings.database_url,
        settings.max_db_pool_size,
        settings.db_connect_timeout_seconds,
    )


def ping_database(engine: Engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.exception("database_ping_failed")
        return False
