import logging

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from taskboard.config.settings import Settings
from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.schemas import UserCreate, UserLogin, UserOut, ProfileUpdate, Token
from taskboard.utils.auth import get_current_user, get_settings
from taskboard.utils.security import hash_password, verify_password, create_access_token
from taskboard.utils.updates import apply_updates

logger = logging.getLogger(__name__)

router = APIRouter()


def token_response(user: User, settings: Settings) -> dict:
    token = create_access_token(data={"sub": user.id}, settings=settings)
    return {
        "access_token": token,
        "token_type": "bearer",
        "user": user,
    }


@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
def signup(user: UserCreate, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    existing_user = db.query(User).filter(User.email == user.email).first()
    if existing_user:
        raise HTTPException(status_code=400, detail="Email already registered")

    new_user = User(
        name=user.name,
        email=user.email,
        hashed_password=hash_password(user.password),
        is_admin=False,
    )

    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info("User signed up: %s", new_user.email)
    return token_response(new_user, settings)


@router.post("/login", response_model=Token)
def login(user: UserLogin, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    db_user = db.query(User).filter(User.email == user.email).first()
    if not db_user or not verify_password(user.password, db_user.hashed_password):
        raise HTTPException(status_code=400, detail="Invalid credentials")

    return token_response(db_user, settings)


@router.get("/profile", response_model=UserOut)
def get_profile(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    return current_user


@router.put("/profile", response_model=UserOut)
def update_profile(
    profile_update: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update the current user's own name, email or password"""
    # Check if email already exists for another user
    if profile_update.email and profile_update.email != current_user.email:
        existing_user = db.query(User).filter(
            User.email == profile_update.email,
            User.id != current_user.id
        ).first()
        if existing_user:
            raise HTTPException(status_code=400, detail="Email already registered")

    try:
        apply_updates(current_user, profile_update)

        db.commit()
        db.refresh(current_user)
        return current_user

    except Exception:
        db.rollback()
        logger.exception("Error updating profile of user %s", current_user.id)
        raise HTTPException(status_code=500, detail="Error updating profile")
