import uuid
from sqlalchemy import Column, String, DateTime, func, DECIMAL, ForeignKey, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from eventry.db.session import Base

class Consumption(Base):
    __tablename__ = "consumptions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_id = Column(UUID(as_uuid=True), ForeignKey("events.id"), nullable=False, index=True)
    ticket_id = Column(UUID(as_uuid=True), ForeignKey("tickets.id"), nullable=True, index=True)
    amount = Column(DECIMAL(10, 2), nullable=False)
    category = Column(String(50), nullable=False)  # drink, food, bottle, ...
    items = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    event = relationship("Event", back_populates="consumptions")
    ticket = relationship("Ticket")
