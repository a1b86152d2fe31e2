from sqlalchemy.orm import Session
from sqlalchemy import select
from app.notes.models import Note
from app.notes.schemas import NoteCreate, NoteUpdate

def _owned(db: Session, user_id: str, note_id: str) -> Note | None:
    return db.scalars(select(Note).where(Note.id == note_id, Note.user_id == user_id)).first()

def list_notes(db: Session, user_id: str) -> list[Note]:
    return list(db.scalars(select(Note).where(Note.user_id == user_id)).all())

def create_note(db: Session, user_id: str, payload: NoteCreate) -> Note:
    note = Note(user_id=user_id, title=payload.title, content=payload.content)
    db.add(note)
    db.commit()
    db.refresh(note)
    return note

def update_note(db: Session, user_id: str, note_id: str, payload: NoteUpdate) -> Note | None:
    # missing and foreign notes look the same to the caller
    note = _owned(db, user_id, note_id)
    if not note:
        return None
    if payload.title is not None:
        note.title = payload.title
    if payload.content is not None:
        note.content = payload.content
    db.commit()
    db.refresh(note)
    return note

def delete_note(db: Session, user_id: str, note_id: str) -> bool:
    note = _owned(db, user_id, note_id)
    if not note:
        return False
    db.delete(note)
    db.commit()
    return True
