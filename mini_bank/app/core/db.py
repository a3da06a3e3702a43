from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata
from .config import Settings, get_settings


def create_engine_for_url(
    database_url: str,
    *,
    echo: bool = False,
    sqlite_busy_timeout: float = 30.0,
) -> Engine:
    connect_args: dict[str, Any] = {}
    options: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        # Sessions are handed to threadpool workers; writers queue on the file lock.
        connect_args = {"check_same_thread": False, "timeout": sqlite_busy_timeout}
    else:
        options["pool_pre_ping"] = True
    return create_engine(database_url, echo=echo, connect_args=connect_args, **options)


def engine_from_settings(settings: Settings) -> Engine:
    return create_engine_for_url(
        settings.database_url,
        echo=settings.echo_sql,
        sqlite_busy_timeout=settings.sqlite_busy_timeout,
    )


engine = engine_from_settings(get_settings())


def init_db() -> None:
    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def get_engine() -> Engine:
    return engine


def set_engine(new_engine: Engine) -> None:
    global engine
    engine = new_engine
