# app/summarize/api.py
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from app.summarize.service import Summarizer

router = APIRouter(prefix="/summarize", tags=["Summarize"])

class SummarizeIn(BaseModel):
    content: str | None = ""

class SummarizeOut(BaseModel):
    summary: str

def get_summarizer(request: Request) -> Summarizer:
    return request.app.state.summarizer

@router.post("", response_model=SummarizeOut)
def api_summarize(inb: SummarizeIn, summarizer: Summarizer = Depends(get_summarizer)):
    return {"summary": summarizer.summarize(inb.content or "")}
