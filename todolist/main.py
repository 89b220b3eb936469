"""Todo List API – FastAPI application."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from todolist.config import get_settings
from todolist.database import Base, engine
from todolist.exceptions import TodoListError, Unauthorized
# Import models so Base.metadata has all tables before create_all (schema source of truth)
from todolist.models import Admin, Guest, Todo, User  # noqa: F401
from todolist.routers import auth, guests, todos, users

log = logging.getLogger("uvicorn.error")

settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(todos.router)
app.include_router(users.router)
app.include_router(guests.router)


@app.exception_handler(TodoListError)
def todolist_error_handler(request: Request, exc: TodoListError):
    # Which token check failed is never disclosed
    body = exc.public_dict() if isinstance(exc, Unauthorized) else exc.to_dict()
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "message": "Invalid request", "details": {"errors": errors}},
    )


@app.on_event("startup")
def startup():
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        log.warning("Database startup failed (tables skipped). Check DATABASE_URL. Error: %s", e)


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}
