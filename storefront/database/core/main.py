# storefront/database/core/main.py
from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from storefront.common.settings import get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(
        schema=_settings.db_schema,
        naming_convention=NAMING_CONVENTION,
    )


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def engine_kwargs(url: str) -> Dict[str, Any]:
    """Engine options for a URL; SQLite pools don't take the sizing knobs."""
    if _is_sqlite(url):
        # FastAPI runs sync endpoints on a thread pool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": _settings.db.pool_size,
        "max_overflow": _settings.db.max_overflow,
        "pool_pre_ping": _settings.db.pool_pre_ping,
        "pool_recycle": _settings.db.pool_recycle,
    }


def build_engine(url: str, **overrides: Any) -> Engine:
    kwargs = engine_kwargs(url)
    kwargs.update(overrides)
    eng = create_engine(url, echo=_settings.db.echo, future=True, **kwargs)

    if _is_sqlite(url):
        # SQLite ignores FOREIGN KEY clauses unless asked per connection
        @event.listens_for(eng, "connect")
        def _enable_fk(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

    elif _settings.db_schema:
        # Ensure the app schema is first, then public (so extensions remain visible)
        @event.listens_for(eng, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{_settings.db_schema}", public')

    return eng


engine = build_engine(_settings.database_url)

SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)

