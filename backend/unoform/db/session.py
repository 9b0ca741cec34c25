from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from unoform.config import DATABASE_URL
from unoform.db.models import GenerationLog

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def record_generation(**fields) -> None:
    """Store a generation log row; any database failure only prints a warning"""
    try:
        with SessionLocal() as session:
            session.add(GenerationLog(**fields))
            session.commit()
    except SQLAlchemyError as e:
        print(f"⚠️ Database not ready — generation not logged: {e}")
