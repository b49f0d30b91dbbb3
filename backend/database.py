# backend/database.py
from sqlalchemy import create_engine, event, MetaData
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

# Deterministic constraint names, shared by create_all, the DDL dump and Alembic.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def normalize_url(url: str) -> str:
    # Hosted Postgres hands out postgres://, SQLAlchemy needs postgresql://
    if url and url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def _enable_sqlite_fk(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE actions unless this is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> Engine:
    url = normalize_url(url)

    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False} # SQLite only
    else:
        connect_args = {}

    eng = create_engine(url, connect_args=connect_args, echo=echo)

    if eng.dialect.name == "sqlite":
        event.listen(eng, "connect", _enable_sqlite_fk)
    return eng


SQLALCHEMY_DATABASE_URL = normalize_url(settings.DATABASE_URL)

engine = build_engine(SQLALCHEMY_DATABASE_URL, echo=settings.SQL_ECHO)

SessionLocal = sessionmaker(autoflush=False, bind=engine)

Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind: Engine = None):
    # Register every model on Base.metadata before creating tables
    import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
