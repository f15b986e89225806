from contextlib import contextmanager
from typing import Callable, Iterator

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from core.config import settings
from models.base import Base

DATABASE_URL = settings.DATABASE_URL

# SQLite cần tắt check_same_thread khi dùng chung với FastAPI
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}


def enable_sqlite_foreign_keys(target: Engine):
    """SQLite không kiểm tra khóa ngoại nếu chưa bật PRAGMA foreign_keys trên từng kết nối."""
    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SessionFactory = Callable[[], Session]


def init_db(bind=None):
    """Tạo các bảng còn thiếu (users, friendships, messages)"""
    import models  # noqa: F401  (đăng ký tất cả model vào Base.metadata)
    Base.metadata.create_all(bind=bind or engine)


@contextmanager
def session_scope(session_factory: SessionFactory) -> Iterator[Session]:
    """Mở một session ngắn hạn và luôn đóng nó khi thoát (kể cả khi lỗi)."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def get_session_factory() -> SessionFactory:
    return SessionLocal


def get_db(session_factory: SessionFactory = Depends(get_session_factory)):
    with session_scope(session_factory) as db:
        yield db
