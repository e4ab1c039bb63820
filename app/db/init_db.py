"""
Database initialization.

Creates all tables.  Production schemas are managed with Alembic; this is
for local databases and first-time setup.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db(bind=None) -> None:
    """
    Initialize database schema.

    Creates every SQLModel table that does not exist yet.
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    bind = bind or engine
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(bind)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    init_db()
