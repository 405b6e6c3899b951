# tests/conftest.py
from __future__ import annotations
import os

# Settings are read at import time; point the app's default engine somewhere harmless.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")

from typing import List

import pytest
from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from starlette.testclient import TestClient

from storefront.common.settings import get_settings
from storefront.database.core.main import build_engine
from storefront.database.models import Base, Category, Product, ProductTag, Tag
from storefront.services.api.app import create_app
from storefront.services.api.deps import get_session_factory


@pytest.fixture(scope="session")
def _database_url(tmp_path_factory):
    cfg = get_settings()
    if cfg.use_testcontainers:
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer(cfg.test_db_image) as pg:
            # Force psycopg (v3) driver in the URL returned by testcontainers (it defaults to psycopg2)
            yield pg.get_connection_url().replace("psycopg2", "psycopg")
    else:
        # A file, not :memory:, so concurrent sessions see the same data
        yield f"sqlite:///{tmp_path_factory.mktemp('db') / 'storefront.db'}"


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    engine = build_engine(_database_url)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(db_engine) -> sessionmaker:
    """
    Sessionmaker bound to the test engine. The service commits for real,
    so tables are emptied after each test instead of rolling back.
    """
    factory = sessionmaker(bind=db_engine, expire_on_commit=False, future=True, autoflush=False)
    try:
        yield factory
    finally:
        with factory.begin() as s:
            for model in (ProductTag, Product, Tag, Category):
                s.execute(delete(model))


@pytest.fixture()
def db(session_factory):
    with session_factory() as s:
        yield s


@pytest.fixture()
def api_client(session_factory):
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


# ---------------------------- seed helpers ------------------------------------

def make_category(factory: sessionmaker, name: str = "Shirts") -> int:
    with factory.begin() as s:
        c = Category(category_name=name)
        s.add(c)
        s.flush()
        return c.id


def make_tags(factory: sessionmaker, *names: str) -> List[int]:
    with factory.begin() as s:
        tags = [Tag(tag_name=n) for n in names]
        s.add_all(tags)
        s.flush()
        return [t.id for t in tags]


@pytest.fixture()
def category_id(session_factory) -> int:
    return make_category(session_factory)


@pytest.fixture()
def tag_ids(session_factory) -> List[int]:
    return make_tags(session_factory, "rock music", "pop music", "blue", "red")
