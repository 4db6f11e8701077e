from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from carelink.core.config import settings
from carelink.core.observability import get_logger

# Registers the tables on SQLModel.metadata
from carelink.infrastructure.database import models  # noqa: F401

logger = get_logger(__name__)


def create_db_engine(url: str | None = None) -> Engine:
    """
    Create the SQLAlchemy engine for ``url`` (defaults to DATABASE_URL).

    In-memory SQLite shares one connection so every session sees the same
    database.
    """
    url = url or settings.DATABASE_URL
    engine_kwargs: dict = {"echo": settings.LOG_SQL}

    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(pool_pre_ping=True, pool_recycle=3600)

    engine = create_engine(url, **engine_kwargs)
    logger.info("Database engine created", dialect=engine.dialect.name)
    return engine


def init_db(engine: Engine) -> None:
    """Create all tables and constraints that do not exist yet."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database schema initialized", tables=sorted(SQLModel.metadata.tables))


def get_session(engine: Engine) -> Session:
    return Session(engine, expire_on_commit=False)
