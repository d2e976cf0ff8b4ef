#!/usr/bin/env python3
"""
Seed the built-in administrator account.

Run it any time; an existing admin with the same email is replaced.
"""

import logging
import sys

from taskboard.config.settings import Settings, configure_logging
from taskboard.database import Database
from taskboard.seed import ADMIN_PASSWORD, seed_admin

logger = logging.getLogger("seed_admin")


def main() -> int:
    settings = Settings()
    configure_logging(settings.log_level)

    database = Database.from_settings(settings)
    try:
        database.create_all()
        db = database.session()
        try:
            admin = seed_admin(db)
        finally:
            db.close()
    except Exception as e:
        logger.error("Error seeding admin: %s", e)
        return 1
    finally:
        database.dispose()

    logger.info("Admin user created successfully!")
    logger.info("Email: %s", admin.email)
    logger.info("Password: %s", ADMIN_PASSWORD)
    return 0


if __name__ == "__main__":
    sys.exit(main())
