from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from taskboard.database import Base
from taskboard.models.user import generate_id


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Owner, fixed at creation
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)

    # System dates
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Tasks are removed explicitly before their owner, so no ORM cascade here
    user = relationship("User", foreign_keys=[user_id])
