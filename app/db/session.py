from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from collections.abc import Generator, Iterator
from app.core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for `url`.
    SQLite connections are shared across threads; in-memory SQLite keeps one
    connection alive so every session sees the same database.
    """
    if url.startswith("sqlite"):
        kwargs: dict[str, object] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, future=True, **kwargs)

    return create_engine(url, echo=echo, pool_pre_ping=True, future=True)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


# Request-scoped database session
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Scope one service operation: commit on success, roll back on any failure.
    Reads issued inside the block run in the same database transaction as the
    write that follows them.
    """
    try:
        yield db
        db.commit()
    except BaseException:
        db.rollback()
        raise


def init_db(bind: Engine | None = None) -> None:
    """Create any missing tables."""
    # models must be imported so their tables are registered on the metadata
    import app.models  # noqa: F401
    from app.models.base import Base

    Base.metadata.create_all(bind=bind or engine)
