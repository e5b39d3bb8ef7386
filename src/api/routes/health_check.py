from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello, NotesFlow server is running."


@router.get("/health")
async def health():
    return {"status": "ok"}
