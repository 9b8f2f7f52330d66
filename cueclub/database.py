"""
Database Connection and Session Management
Uses PostgreSQL with asyncpg
"""

import logging
from typing import Optional

from databases import Database
from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base
from cueclub.config import settings

logger = logging.getLogger(__name__)

# Database URL
DATABASE_URL = settings.DATABASE_URL

# For Supabase connection pooler (pgbouncer), disable prepared statements
if "supabase.com" in DATABASE_URL or "pooler.supabase.com" in DATABASE_URL:
    db_options = {"min_size": 1, "max_size": 5, "statement_cache_size": 0}
else:
    db_options = {"min_size": 1, "max_size": 10}

# Create database instance for async queries
database = Database(DATABASE_URL, **db_options)

# Metadata for models
metadata = MetaData()

# Base class for models
Base = declarative_base(metadata=metadata)

# SQLSTATE raised by PostgreSQL for unique / exclusion index violations
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: BaseException, constraint_name: Optional[str] = None) -> bool:
    """
    Check whether a driver exception is a unique constraint violation

    Args:
        exc: Exception raised by the database driver
        constraint_name: Only match violations of this constraint / index

    Returns:
        True if the exception carries SQLSTATE 23505 (and the constraint matches)
    """
    if getattr(exc, "sqlstate", None) != UNIQUE_VIOLATION:
        return False
    if constraint_name is None:
        return True
    return getattr(exc, "constraint_name", None) == constraint_name


# Dependency to get database connection
async def get_database():
    """Get database connection"""
    return database


async def connect_db():
    """Connect to database on startup"""
    await database.connect()
    logger.info("Database connected")


async def disconnect_db():
    """Disconnect from database on shutdown"""
    await database.disconnect()
    logger.info("Database disconnected")
