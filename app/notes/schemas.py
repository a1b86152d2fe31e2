from app.shared.timestamps import UTCDateTime
from pydantic import BaseModel, ConfigDict
from typing import Optional

class NoteCreate(BaseModel):
    title: str = ""
    content: str = ""

class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None

class NoteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    title: str
    content: str
    created_at: UTCDateTime
    updated_at: UTCDateTime | None = None
