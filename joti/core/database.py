from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from joti.core.config import settings


def make_engine(database_url: str):
    """Engine SQLAlchemy, SQLite partagé entre threads"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # timeout = busy timeout, les writers concurrents attendent au lieu d'échouer
        connect_args = {"check_same_thread": False, "timeout": 30}
    return create_engine(database_url, echo=False, connect_args=connect_args)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def configure(database_url: str):
    """Rebind engine + SessionLocal (utilisé par la CLI)"""
    global engine
    engine = make_engine(database_url)
    SessionLocal.configure(bind=engine)
    return engine


def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
