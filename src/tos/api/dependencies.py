from __future__ import annotations

from fastapi import Request
from sqlalchemy.engine import Engine

from tos.application.ports.repositories import TableOrderRepository
from tos.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_engine_dep(request: Request) -> Engine:
    return request.app.state.engine


def get_order_repository(request: Request) -> TableOrderRepository:
    return request.app.state.order_repository
