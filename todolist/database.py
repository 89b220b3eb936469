"""
Database connection and session.

Schema source of truth: todolist.models. On startup, Base.metadata.create_all(bind=engine)
creates all tables and indexes from the current models.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from todolist.config import Settings, get_settings

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    """Engine for settings.database_url. SQLite connections are shared across request threads."""
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


engine = build_engine(get_settings())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
