from __future__ import annotations

from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def create_engine_for_url(database_url: str) -> Engine:
    connect_args: dict[str, Any] = {}
    kwargs: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            # every session must see the same in-memory database
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, echo=False, connect_args=connect_args, **kwargs)


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
