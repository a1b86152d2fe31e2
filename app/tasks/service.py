from sqlalchemy.orm import Session
from sqlalchemy import select, desc
from app.tasks.models import Task
from app.tasks.schemas import TaskCreate, TaskUpdate
from app.shared.errors import ValidationError

def _owned(db: Session, user_id: str, task_id: str) -> Task | None:
    return db.scalars(select(Task).where(Task.id == task_id, Task.user_id == user_id)).first()

def list_tasks(db: Session, user_id: str) -> list[Task]:
    stmt = select(Task).where(Task.user_id == user_id).order_by(desc(Task.created_at))
    return list(db.scalars(stmt).all())

def create_task(db: Session, user_id: str, payload: TaskCreate) -> Task:
    title = payload.title.strip()
    if not title:
        raise ValidationError("title required")
    task = Task(user_id=user_id, title=title, done=False)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task

def update_task(db: Session, user_id: str, task_id: str, payload: TaskUpdate) -> Task | None:
    task = _owned(db, user_id, task_id)
    if not task:
        return None
    if payload.title is not None:
        title = payload.title.strip()
        if not title:
            raise ValidationError("title required")
        task.title = title
    if payload.done is not None:
        task.done = payload.done
    db.commit()
    db.refresh(task)
    return task

def delete_task(db: Session, user_id: str, task_id: str) -> bool:
    task = _owned(db, user_id, task_id)
    if not task:
        return False
    db.delete(task)
    db.commit()
    return True
