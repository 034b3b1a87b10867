from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from tos.api.dependencies import get_engine_dep
from tos.application.errors import StorageError
from tos.infrastructure.db.session import ping_database

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/v1/health")
def health(engine: Engine = Depends(get_engine_dep)) -> dict[str, str]:
    logger.info("health_check")
    if not ping_database(engine):
        raise StorageError("database is unreachable")
    return {"status": "healthy!"}
