import logging
import re
from typing import Any, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Result
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from jobly.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,  # Connection pool size
    max_overflow=20  # Allow up to 20 connections beyond pool_size
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

# $1, $2, ... positional placeholders
_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> Result:
    """
    Execute SQL written with $1-style positional placeholders.

    Placeholders are rewritten to SQLAlchemy named binds (:p1, :p2, ...) and
    values are bound in order, so values never end up in the SQL text.

    Args:
        db: Database session
        sql: SQL statement using $n placeholders
        values: Values for $1..$n, in order

    Returns:
        SQLAlchemy Result for the executed statement
    """
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return db.execute(text(_PLACEHOLDER_RE.sub(r":p\1", sql)), params)


def init_db():
    """
    Initialize database.

    Alembic owns the schema ("alembic upgrade head"); this only registers
    the models. Set AUTO_CREATE_TABLES for throwaway environments.
    """
    from jobly.models import company, job, user  # noqa: F401  Import models to register them
    if settings.AUTO_CREATE_TABLES:
        logger.info("AUTO_CREATE_TABLES set, creating tables")
        Base.metadata.create_all(bind=engine)
