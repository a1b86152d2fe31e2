import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from app.shared.config import settings
from app.shared.db import init_db
from app.shared.errors import AppError, ServerError, ValidationError
from app.summarize.service import build_summarizer

# Routers Import
from app.auth.api import router as auth_router
from app.notes.api import router as notes_router
from app.tasks.api import router as tasks_router
from app.summarize.api import router as summarize_router

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Auth", "description": "Sign up, log in, session cookie / bearer token"},
    {"name": "Notes", "description": "Create, list, edit, delete your notes"},
    {"name": "Tasks", "description": "Checklist tasks with a done flag"},
    {"name": "Summarize", "description": "AI bullet-point summary of note content"},
    {"name": "Health", "description": "Service health"},
]

PUBLIC_PATHS = {"/healthz", "/auth/signup", "/auth/login", "/auth/token", "/auth/logout", "/summarize"}

app = FastAPI(
    title="MyWorkspace API",
    version="0.1.0",
    description="Notes, tasks and AI summaries for a personal workspace.",
    openapi_tags=TAGS_METADATA,
)

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# ---- error handlers: one envelope for every failure ----
def _error_list(exc: RequestValidationError) -> list[dict]:
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]

@app.exception_handler(AppError)
async def _app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status, content=exc.to_body())

@app.exception_handler(RequestValidationError)
async def _validation_handler(request: Request, exc: RequestValidationError):
    err = ValidationError("invalid request body", details=_error_list(exc))
    return JSONResponse(status_code=err.status, content=err.to_body())

@app.exception_handler(Exception)
async def _unhandled_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    err = ServerError("internal server error")
    return JSONResponse(status_code=err.status, content=err.to_body())

# ----------------------------------------------------------------------


@app.on_event("startup")
def _startup():
    init_db()
    app.state.summarizer = build_summarizer(settings)

@app.on_event("shutdown")
def _shutdown():
    summarizer = getattr(app.state, "summarizer", None)
    if summarizer is not None:
        summarizer.close()

@app.get("/healthz", tags=["Health"])
def healthz():
    return {"ok": True}

# Mount feature routers
app.include_router(auth_router)
app.include_router(notes_router)
app.include_router(tasks_router)
app.include_router(summarize_router)

# --- Custom OpenAPI: add bearerAuth as default security for protected routes ---
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        tags=app.openapi_tags,
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})
    schema["components"]["securitySchemes"]["bearerAuth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }
    for path, ops in schema.get("paths", {}).items():
        if path in PUBLIC_PATHS:
            continue
        for op in ops.values():
            op.setdefault("security", [{"bearerAuth": []}])
    app.openapi_schema = schema
    return app.openapi_schema

app.openapi = custom_openapi
