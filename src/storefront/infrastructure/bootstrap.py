"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)
from storefront.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork


@lru_cache(maxsize=None)
def _engine(url: str, echo: bool) -> Engine:
    return create_db_engine(url, echo=echo)


@lru_cache(maxsize=None)
def _session_factory(url: str, echo: bool) -> sessionmaker[Session]:
    return create_session_factory(_engine(url, echo))


def settings() -> Settings:
    return Settings.from_env()


def unit_of_work() -> SqlUnitOfWork:
    cfg = settings()
    return SqlUnitOfWork(_session_factory(cfg.database_url, cfg.sql_echo))


def init_database() -> str:
    """Create the schema for the configured database and return its URL."""
    cfg = settings()
    create_schema(_engine(cfg.database_url, cfg.sql_echo))
    return cfg.database_url
