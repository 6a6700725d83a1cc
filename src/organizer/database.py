"""Database engine setup."""

from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from organizer.config import Settings


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def create_db_engine(settings: Settings) -> Engine:
    """Create an engine for the configured database URL."""
    url = str(settings.database_url)

    if url.startswith("sqlite"):
        options: dict = {"connect_args": {"check_same_thread": False}}
        # An in-memory database only lives as long as its single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
    else:
        options = {
            "pool_pre_ping": True,
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
        }

    engine = create_engine(url, echo=settings.db_echo, **options)

    if settings.otel_enabled:
        SQLAlchemyInstrumentor().instrument(
            engine=engine,
            service=settings.otel_service_name,
        )

    return engine


def create_tables(engine: Engine) -> None:
    """Create all tables in the database."""
    Base.metadata.create_all(bind=engine)
