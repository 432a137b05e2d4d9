from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from core.config import settings
# Use the same Base as models to ensure one metadata registry
from models.base import Base
from crud.store import EntityStore

_uri = settings.SQLALCHEMY_DATABASE_URI
_is_sqlite = _uri.startswith("sqlite")

engine = create_engine(
    _uri,
    pool_pre_ping=True,
    pool_recycle=3600,
    future=True,
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)

if _is_sqlite:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    @event.listens_for(engine, "connect")
    def _enable_sqlite_fks(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_store(db=Depends(get_db)) -> EntityStore:
    return EntityStore(db)
