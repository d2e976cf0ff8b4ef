"""
Administrator bootstrap.

Recreates the single built-in administrator account. Safe to run any number
of times: the previous account with the same email, and its tasks, are
removed first.
"""

import logging

from sqlalchemy.orm import Session

from taskboard.models.task import Task
from taskboard.models.user import User
from taskboard.utils.security import hash_password

logger = logging.getLogger(__name__)

ADMIN_NAME = "Admin"
ADMIN_EMAIL = "admin@mylogin.com"
ADMIN_PASSWORD = "admin123"


def seed_admin(db: Session) -> User:
    """Delete any existing admin account and create a fresh one"""
    try:
        existing = db.query(User).filter(User.email == ADMIN_EMAIL).first()
        if existing:
            db.query(Task).filter(Task.user_id == existing.id).delete(synchronize_session=False)
            db.delete(existing)
            db.flush()
            logger.info("Old admin deleted")

        admin = User(
            name=ADMIN_NAME,
            email=ADMIN_EMAIL,
            hashed_password=hash_password(ADMIN_PASSWORD),
            is_admin=True,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
    except Exception:
        db.rollback()
        raise

    logger.info("Admin user created: %s", admin.email)
    return admin
