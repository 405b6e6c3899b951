"""Database initialization."""
from __future__ import annotations

from typing import Optional

from sqlalchemy.engine import Engine

from storefront.common.logging import get_logger
from storefront.database.core.main import engine as default_engine
from storefront.database.models import Base

logger = get_logger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """Create all tables that don't exist yet."""
    target = bind or default_engine
    Base.metadata.create_all(bind=target)
    logger.info("Database initialized with tables: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    init_db()
