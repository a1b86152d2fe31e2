from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import current_user_id
from app.shared.errors import NotFoundError
from app.shared.http import ok
from app.notes.schemas import NoteCreate, NoteUpdate, NoteOut
from app.notes.service import list_notes, create_note, update_note, delete_note

router = APIRouter(prefix="/notes", tags=["Notes"], dependencies=[Depends(current_user_id)])

@router.get("", response_model=list[NoteOut])
def list_n(uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return list_notes(db, uid)

@router.post("", response_model=NoteOut, status_code=201)
def create_n(payload: NoteCreate, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return create_note(db, uid, payload)

@router.put("/{note_id}", response_model=NoteOut)
def update_n(note_id: str, payload: NoteUpdate, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    note = update_note(db, uid, note_id, payload)
    if not note:
        raise NotFoundError("Note not found")
    return note

@router.delete("/{note_id}")
def delete_n(note_id: str, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    if not delete_note(db, uid, note_id):
        raise NotFoundError("Note not found")
    return ok({"deleted": True, "id": note_id})
