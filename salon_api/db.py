# salon_api/db.py

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

logger = logging.getLogger(__name__)


def make_engine(database_url: str) -> Engine:
    """Engine = connection to the database.

    SQLite needs ``check_same_thread`` off because FastAPI runs sync handlers
    in a threadpool. In-memory SQLite also needs a single shared connection,
    otherwise every new connection sees an empty database.
    """
    kwargs = {"echo": False}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    return create_engine(database_url, **kwargs)


def create_db_and_tables(engine: Engine) -> None:
    # models must be imported so their tables are registered on the metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")
