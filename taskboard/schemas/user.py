from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional
from datetime import datetime

MIN_PASSWORD_LENGTH = 6


class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str

    @field_validator('name')
    @classmethod
    def name_must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError('Name is required')
        return v.strip()

    @field_validator('password')
    @classmethod
    def password_min_length(cls, v):
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserBrief(BaseModel):
    """Owner details embedded in task responses"""
    id: str
    name: str
    email: str

    model_config = {
        "from_attributes": True
    }


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    is_admin: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


# Blank strings on these models mean "leave unchanged", see apply_updates
class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator('email', mode='before')
    @classmethod
    def blank_email_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('password')
    @classmethod
    def password_min_length(cls, v):
        if v and len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
        return v


class UserUpdate(ProfileUpdate):
    is_admin: Optional[bool] = None
