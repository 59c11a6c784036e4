"""
Database connector — SQLAlchemy engine factory and read-only transaction scope.
The introspection functions in core.pg_structure run on the connection this
module hands out; they never open or commit transactions themselves.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import OperationalError

from config import Settings

logger = logging.getLogger(__name__)


def build_engine(cfg: Settings) -> Engine:
    """Create the engine without touching the database."""
    return create_engine(cfg.DB_URI, pool_pre_ping=True, pool_size=cfg.DB_POOL_SIZE)


def create_engine_from_settings(cfg: Settings) -> Engine:
    """Build and test a SQLAlchemy engine from the configured URI."""
    engine = build_engine(cfg)
    # Validate the connection immediately
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except OperationalError as e:
        engine.dispose()
        raise ValueError(f"Could not connect to database: {e}") from e
    logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    return engine


@contextmanager
def read_only_transaction(engine: Engine) -> Iterator[Connection]:
    """Yield a connection inside a READ ONLY transaction, rolled back or committed on exit."""
    with engine.begin() as conn:
        conn.execute(text("SET TRANSACTION READ ONLY"))
        yield conn
