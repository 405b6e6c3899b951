# storefront/database/core/transaction.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session, sessionmaker


@contextmanager
def unit_of_work(factory: sessionmaker) -> Iterator[Session]:
    """
    One short-lived session with its own transaction: COMMIT on normal exit,
    ROLLBACK if an exception bubbles out, always closed.
    """
    with factory() as session:
        with session.begin():
            yield session
