# taskboard/utils/auth.py
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status
from jose import JWTError
from sqlalchemy.orm import Session

from taskboard.config.settings import Settings
from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.utils.security import decode_access_token


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def parse_bearer(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` value.

    Anything other than exactly two space separated parts with the
    ``Bearer`` scheme yields None.
    """
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]


def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    token = parse_bearer(authorization)
    if token is None:
        raise _unauthorized("Not authorized, no token")

    try:
        payload = decode_access_token(token, settings)
        user_id: str = payload.get("sub")
        if user_id is None:
            raise _unauthorized("Not authorized, token failed")
    except JWTError:
        raise _unauthorized("Not authorized, token failed")

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise _unauthorized("Not authorized, user not found")

    request.state.user = user
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
