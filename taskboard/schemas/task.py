# taskboard/schemas/task.py
from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional

from taskboard.schemas.user import UserBrief


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def title_must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError('Title is required')
        return v


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


# For returning task data
class TaskOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    user: UserBrief
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
