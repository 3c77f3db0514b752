"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy import create_engine

from blueprints.database.schema import Base
from blueprints.models import Blueprint, Point
from blueprints.persistence import InMemoryBlueprintStore, SqlBlueprintStore


def make_blueprint(author="john", name="house", points=((0, 0), (10, 0), (10, 10), (0, 10))):
    return Blueprint(author=author, name=name, points=[Point(x=x, y=y) for x, y in points])


@pytest.fixture
def engine():
    """Create a temporary in-memory database engine with the blueprint tables."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sql_store(engine):
    return SqlBlueprintStore(engine)


@pytest.fixture
def memory_store():
    return InMemoryBlueprintStore()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Run the test once per backend."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def file_sql_store(tmp_path):
    """SQL store on a file database, safe to share between threads."""
    store = SqlBlueprintStore.from_url(f"sqlite:///{tmp_path / 'blueprints.db'}")
    try:
        yield store
    finally:
        store.engine.dispose()


@pytest.fixture(params=["memory", "file_sql"])
def threaded_store(request):
    """Backends that can be shared between threads (in-memory SQLite cannot)."""
    return request.getfixturevalue(f"{request.param}_store")
