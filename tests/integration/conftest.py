from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from tos.api.main import create_app
from tos.core.config import Settings
from tos.infrastructure.db.session import get_engine
from tos.infrastructure.db.models.order import OrderModel
from tos.infrastructure.db.repositories.order_repo import SqlAlchemyTableOrderRepository
from tos.tools.seed import seed_demo_orders

SRC_DIR = Path(__file__).resolve().parents[2] / "src"
MIGRATIONS_DIR = SRC_DIR / "tos" / "infrastructure" / "db" / "migrations"


@pytest.fixture(scope="session")
def integration_settings(tmp_path_factory: pytest.TempPathFactory) -> Settings:
    database_url = os.getenv("TEST_DATABASE_URL")
    if not database_url:
        database_path = tmp_path_factory.mktemp("db") / "orders.sqlite3"
        database_url = f"sqlite:///{database_path}"
    return Settings(database_url=database_url, max_tables=100, app_env="test")


@pytest.fixture(scope="session")
def engine(integration_settings: Settings) -> Iterator[Engine]:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", integration_settings.database_url)
    command.upgrade(config, "head")

    if integration_settings.database_url.startswith("sqlite"):
        # Worker threads of the test client share pooled SQLite connections.
        engine = create_engine(
            integration_settings.database_url,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = get_engine(integration_settings)
    yield engine
    engine.dispose()


@pytest.fixture(autouse=True)
def seeded_orders(engine: Engine) -> Iterator[None]:
    with Session(engine) as session, session.begin():
        session.execute(delete(OrderModel))
    seed_demo_orders(engine)
    yield
    with Session(engine) as session, session.begin():
        session.execute(delete(OrderModel))


@pytest.fixture
def repository(engine: Engine) -> SqlAlchemyTableOrderRepository:
    return SqlAlchemyTableOrderRepository(engine)


@pytest.fixture
def client(integration_settings: Settings, engine: Engine) -> Iterator[TestClient]:
    app = create_app(settings=integration_settings, engine=engine)
    with TestClient(app) as test_client:
        yield test_client
