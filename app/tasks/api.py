from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import current_user_id
from app.shared.errors import NotFoundError
from app.shared.http import ok
from app.tasks.schemas import TaskCreate, TaskUpdate, TaskOut
from app.tasks.service import list_tasks, create_task, update_task, delete_task

router = APIRouter(prefix="/tasks", tags=["Tasks"], dependencies=[Depends(current_user_id)])

@router.get("", response_model=list[TaskOut])
def list_t(uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return list_tasks(db, uid)

@router.post("", response_model=TaskOut, status_code=201)
def create_t(payload: TaskCreate, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return create_task(db, uid, payload)

@router.put("/{task_id}", response_model=TaskOut)
def update_t(task_id: str, payload: TaskUpdate, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    task = update_task(db, uid, task_id, payload)
    if not task:
        raise NotFoundError("Task not found")
    return task

@router.delete("/{task_id}")
def delete_t(task_id: str, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    if not delete_task(db, uid, task_id):
        raise NotFoundError("Task not found")
    return ok({"deleted": True, "id": task_id})
