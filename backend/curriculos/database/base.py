"""Database engine, session factory, and base model."""

import logging
from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool

from ..config import settings

logger = logging.getLogger(__name__)

if settings.is_sqlite:
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(
        settings.database_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )

SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


def init_db() -> None:
    """Create missing tables. There is no migration step: existing tables are left as they are."""
    # Models must be imported so Base.metadata sees their tables.
    from ..curriculo.models import Curriculo  # noqa: F401

    logger.info("Creating/verifying database tables")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables verified: %s", ", ".join(Base.metadata.tables.keys()))


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
