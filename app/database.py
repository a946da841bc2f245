import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from app.config import settings

logger = logging.getLogger(__name__)


# ─── Engine ────────────────────────────────────────────────────────────────────
def _engine_kwargs() -> dict:
    if settings.is_sqlite:
        # Tests / local dev: one in-process connection shared across threads
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass":    StaticPool,
            "echo":         settings.DATABASE_ECHO,
        }
    return {
        "poolclass":     QueuePool,
        "pool_size":     settings.DATABASE_POOL_SIZE,
        "max_overflow":  settings.DATABASE_MAX_OVERFLOW,
        "pool_timeout":  settings.DATABASE_POOL_TIMEOUT,
        "pool_pre_ping": True,
        "echo":          settings.DATABASE_ECHO,
    }


engine = create_engine(settings.DATABASE_URL, **_engine_kwargs())

if settings.is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, _record):
        # ON DELETE CASCADE / SET NULL are ignored by SQLite without this
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


class Base(DeclarativeBase):
    """Declarative base for every model in app/models/."""


# ─── Request-scoped session ────────────────────────────────────────────────────
def get_db():
    """
    FastAPI dependency yielding one session per request.
    Anything left uncommitted by a failing request is rolled back.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def check_db_connection() -> bool:
    """`SELECT 1` against the configured database; used at startup."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
    return True
