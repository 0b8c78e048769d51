# /student-records/app/db/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.config import DATABASE_URL


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    SQLite ships with foreign-key enforcement switched off. Turning it on for
    every new connection is what makes `ON DELETE CASCADE` on marks work.
    """
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {"pool_pre_ping": True}
engine = create_engine(DATABASE_URL, **engine_args)
if DATABASE_URL.startswith("sqlite"):
    enable_sqlite_foreign_keys(engine)

# Each instance of SessionLocal is one unit of work against the pooled engine.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency to get a DB session. Used by the API routers through get_db_service.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
