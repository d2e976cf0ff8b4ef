# taskboard/routers/tasks.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from taskboard.database import get_db
from taskboard.models import Task, User
from taskboard.schemas import Message, TaskCreate, TaskOut, TaskUpdate
from taskboard.utils.auth import get_current_user
from taskboard.utils.updates import apply_updates

logger = logging.getLogger(__name__)

router = APIRouter()


def get_own_task(db: Session, task_id: str, current_user: User) -> Task:
    """Load a task owned by the caller; other users' tasks look missing"""
    task = db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == current_user.id
    ).first()
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.get("/", response_model=List[TaskOut])
def get_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get the current user's tasks, newest first"""
    return db.query(Task).options(
        joinedload(Task.user)
    ).filter(
        Task.user_id == current_user.id
    ).order_by(Task.created_at.desc()).all()


@router.post("/", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a task owned by the current user"""
    try:
        db_task = Task(
            title=task.title,
            description=task.description,
            user_id=current_user.id,
        )
        db.add(db_task)
        db.commit()
        db.refresh(db_task)
        return db_task

    except Exception:
        db.rollback()
        logger.exception("Error creating task for user %s", current_user.id)
        raise HTTPException(status_code=500, detail="Error creating task")


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: str,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update one of the current user's tasks"""
    try:
        task = get_own_task(db, task_id, current_user)

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


@router.delete("/{task_id}", response_model=Message)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete one of the current user's tasks"""
    try:
        task = get_own_task(db, task_id, current_user)

        db.delete(task)
        db.commit()

        return {"message": "Task deleted"}

    except HTTPException:
        raise
    except Exception:
        db.rollback()
        logger.exception("Error deleting task %s", task_id)
        raise HTTPException(status_code=500, detail="Error deleting task")
