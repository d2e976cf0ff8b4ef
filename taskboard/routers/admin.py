# taskboard/routers/admin.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from taskboard.database import get_db
from taskboard.models import Task, User
from taskboard.schemas import Message, TaskOut, TaskUpdate, UserOut, UserUpdate
from taskboard.utils.auth import require_admin
from taskboard.utils.updates import apply_updates

logger = logging.getLogger(__name__)

# Every route below sits behind the auth and admin guards
router = APIRouter(dependencies=[Depends(require_admin)])


# ======================
# Users
# ======================

@router.get("/users", response_model=List[UserOut])
def get_all_users(db: Session = Depends(get_db)):
    """Get all users, password hashes excluded"""
    return db.query(User).all()


@router.put("/user/{user_id}", response_model=UserOut)
def update_user(user_id: str, user_update: UserUpdate, db: Session = Depends(get_db)):
    """Partially update a user; blank name, email or password keeps the stored value"""
    try:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        apply_updates(user, user_update)

        db.commit()
        db.refresh(user)
        return user

    except HTTPException:
        raise
    except Exception:
        db.rollback()
        logger.exception("Error updating user %s", user_id)
        raise HTTPException(status_code=500, detail="Error updating user")


@router.delete("/user/{user_id}", response_model=Message)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Delete a user together with every task they own"""
    try:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        # Tasks and owner go in the same transaction
        removed = db.query(Task).filter(Task.user_id == user_id).delete(synchronize_session=False)
        db.delete(user)
        db.commit()

        logger.info("Deleted user %s and %d task(s)", user_id, removed)
        return {"message": "User deleted"}

    except HTTPException:
        raise
    except Exception:
        db.rollback()
        logger.exception("Error deleting user %s", user_id)
        raise HTTPException(status_code=500, detail="Error deleting user")


@router.get("/users/{user_id}/tasks", response_model=List[TaskOut])
def get_user_tasks(user_id: str, db: Session = Depends(get_db)):
    """Get all tasks of a specific user, newest first"""
    try:
        return db.query(Task).options(
            joinedload(Task.user)
        ).filter(
            Task.user_id == user_id
        ).order_by(Task.created_at.desc()).all()

    except Exception:
        logger.exception("Error fetching tasks of user %s", user_id)
        raise HTTPException(status_code=500, detail="Error fetching user's tasks")


# ======================
# Tasks
# ======================

@router.get("/tasks", response_model=List[TaskOut])
def get_all_tasks(db: Session = Depends(get_db)):
    """Get every task with its owner's name and email"""
    return db.query(Task).options(joinedload(Task.user)).all()


@router.put("/task/{task_id}", response_model=TaskOut)
def update_task(task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Partially update any task; blank title or description keeps the stored value"""
    try:
        task = db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise HTTPException(status_code=404, detail="Task not found")

        apply_updates(task, task_update)

        db.commit()
        db.refresh(task)
        return task

    except HTTPException:
        raise
    except Exception:
        db.rollback()
        logger.exception("Error updating task %s", task_id)
        raise HTTPException(status_code=500, detail="Error updating task")


@router.delete("/task/{task_id}", response_model=Message)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    """Delete any task"""
    try:
        task = db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise HTTPException(status_code=404, detail="Task not found")

        db.delete(task)
        db.commit()

        return {"message": "Task deleted"}

    except HTTPException:
        raise
    except Exception:
        db.rollback()
        logger.exception("Error deleting task %s", task_id)
        raise HTTPException(status_code=500, detail="Error deleting task")
