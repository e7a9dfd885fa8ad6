# cattime/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cattime.core.config import settings

# SQLite connections are handed between threadpool workers by FastAPI
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
