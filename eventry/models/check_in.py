import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Integer, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from eventry.db.session import Base

class CheckIn(Base):
    __tablename__ = "check_ins"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    ticket_id = Column(UUID(as_uuid=True), ForeignKey("tickets.id"), nullable=False, index=True)
    scanned_at = Column(DateTime(timezone=True), nullable=False, index=True)
    gate = Column(String(20), default="MAIN")  # MAIN, VIP, STAFF
    group_size = Column(Integer, nullable=False, default=1)
    success = Column(Boolean, default=True)

    ticket = relationship("Ticket", back_populates="check_ins")
