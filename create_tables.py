# create_tables.py
import logging
import sys

from taskboard.config.settings import Settings, configure_logging
from taskboard.database import Database

logger = logging.getLogger("create_tables")


def create_tables(settings: Settings = None) -> None:
    """Create all tables that do not exist yet"""
    settings = settings or Settings()
    database = Database.from_settings(settings)
    try:
        database.create_all()
        logger.info("All tables created successfully")
    finally:
        database.dispose()


if __name__ == "__main__":
    configure_logging()
    try:
        create_tables()
    except Exception as e:
        logger.error("Error creating tables: %s", e)
        sys.exit(1)
