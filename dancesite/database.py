import logging
import time

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import (
    DATABASE_URL,
    DB_LOG_SLOW_QUERIES,
    DB_MAX_OVERFLOW,
    DB_POOL_RECYCLE,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
    DB_SLOW_QUERY_THRESHOLD,
)

logger = logging.getLogger(__name__)


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def build_engine(url: str) -> Engine:
    """Create an engine for ``url``.

    SQLite gets thread-agnostic connections (FastAPI runs sync endpoints in a
    thread pool) and foreign keys switched on, so ON DELETE CASCADE works.
    Server databases get the pooled configuration from the environment.
    """
    if is_sqlite(url):
        new_engine = create_engine(url, connect_args={"check_same_thread": False})
        enable_sqlite_foreign_keys(new_engine)
        return new_engine

    return create_engine(
        url,
        pool_pre_ping=True,  # Test connections before using
        pool_recycle=DB_POOL_RECYCLE,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_timeout=DB_POOL_TIMEOUT,
        echo=False,  # Don't log all SQL (use slow query logging instead)
    )


def enable_sqlite_foreign_keys(target: Engine) -> None:
    # SQLite ignores REFERENCES clauses unless this is set per connection
    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def enable_slow_query_logging(target: Engine, threshold: float) -> None:
    @event.listens_for(target, "before_cursor_execute")
    def before_cursor_execute(conn, _cursor, statement, _parameters, context, _executemany):
        conn.info.setdefault("query_start_time", []).append(time.time())

    @event.listens_for(target, "after_cursor_execute")
    def after_cursor_execute(conn, _cursor, statement, _parameters, context, _executemany):
        total = time.time() - conn.info["query_start_time"].pop(-1)
        if total > threshold:
            logger.warning(f"Slow query ({total:.2f}s): {statement[:200]}...")


try:
    engine = build_engine(DATABASE_URL)
    logger.info("Database engine created (%s)", engine.url.get_backend_name())
except Exception as e:
    logger.error(f"Failed to create database engine: {e}")
    raise

if DB_LOG_SLOW_QUERIES:
    enable_slow_query_logging(engine, DB_SLOW_QUERY_THRESHOLD)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
