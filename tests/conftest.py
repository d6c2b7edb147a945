"""Shared fixtures for the SQL-backed tests.

Each test gets its own SQLite file under ``tmp_path``; a file rather than
``:memory:`` so that a second engine can act as a concurrent buyer.
"""

import pytest

from storefront.infrastructure.persistence.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)
from storefront.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'storefront.db'}"


@pytest.fixture
def engine(database_url):
    engine = create_db_engine(database_url)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def uow(session_factory):
    return SqlUnitOfWork(session_factory)
