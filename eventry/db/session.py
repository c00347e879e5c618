from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from eventry.core.config import settings

# Reports are read-only; the pool only needs to survive idle connections
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
