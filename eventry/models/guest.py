import uuid
from sqlalchemy import Column, String, DateTime, Date, func, Integer
from sqlalchemy.dialects.postgresql import UUID
from eventry.db.session import Base

class Guest(Base):
    __tablename__ = "guests"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True, index=True)
    birth_date = Column(Date, nullable=True)
    city = Column(String(100), nullable=True, index=True)
    gender = Column(String(2), nullable=True)  # M, F, NB
    total_events = Column(Integer, nullable=False, default=0)  # maintained by check-in
    created_at = Column(DateTime(timezone=True), server_default=func.now())
