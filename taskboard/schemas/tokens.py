# taskboard/schemas/tokens.py
from pydantic import BaseModel
from taskboard.schemas.user import UserOut


class Token(BaseModel):
    """Login/signup envelope; ``user`` is built from the ORM row"""
    access_token: str
    token_type: str
    user: UserOut

    model_config = {
        "from_attributes": True
    }


class Message(BaseModel):
    message: str
